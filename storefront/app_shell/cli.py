import argparse
import logging
import sys
from pathlib import Path

from storefront.adapters.render.css_context import CssVariableContext
from storefront.adapters.sqlite.migrator import SQLiteMigrator
from storefront.adapters.sqlite.repos import SQLiteConfigRepo
from storefront.api.deps import Settings, init_storage
from storefront.components.theme import ThemeApplier
from storefront.domain.policy import PolicyEngine
from storefront.services.config import ConfigService

logger = logging.getLogger("cli")


def get_settings(args: argparse.Namespace) -> Settings:
    rules_path = Path(args.rules) if args.rules else None
    if rules_path is not None and not rules_path.exists():
        logger.error("Rules file %s not found.", rules_path)
        sys.exit(1)
    return Settings(data_dir=args.data_dir, rules_path=rules_path)


def _config_service(settings: Settings) -> ConfigService:
    return ConfigService(SQLiteConfigRepo(settings.db_path), PolicyEngine(settings.rules.access))


def handle_init_db(settings: Settings, args: argparse.Namespace) -> None:
    init_storage(settings)
    print(f"Database ready at {settings.db_path}")


def handle_rollback_db(settings: Settings, args: argparse.Namespace) -> None:
    name = SQLiteMigrator(settings.db_path).rollback_last()
    print(f"Rolled back {name}" if name else "Nothing to roll back")


def handle_reset_layout(settings: Settings, args: argparse.Namespace) -> None:
    config = _config_service(settings).reset_layout()
    print("Home layout reset: " + ", ".join(s.type for s in config.home_layout))


def handle_theme_css(settings: Settings, args: argparse.Namespace) -> None:
    context = CssVariableContext()
    ThemeApplier(context, settings.rules.theme).apply(_config_service(settings).get())
    css = context.stylesheet()
    if args.output:
        Path(args.output).write_text(css, encoding="utf-8")
        print(f"Stylesheet written to {args.output}")
    else:
        print(css, end="")


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO)

    parser = argparse.ArgumentParser(description="Lumiere Storefront CLI")
    parser.add_argument("--rules", help="Path to the rules YAML file")
    parser.add_argument("--data-dir", help="Directory holding the database")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # init-db
    subparsers.add_parser("init-db", help="Apply migrations and create the default admin")

    # rollback-db
    subparsers.add_parser("rollback-db", help="Undo the most recent migration")

    # reset-layout
    subparsers.add_parser("reset-layout", help="Restore the default home layout")

    # theme-css
    css_parser = subparsers.add_parser("theme-css", help="Print the theme as CSS variables")
    css_parser.add_argument("--output", help="Write the stylesheet to this file")

    args = parser.parse_args(argv)
    settings = get_settings(args)

    if args.command == "init-db":
        handle_init_db(settings, args)
    elif args.command == "rollback-db":
        handle_rollback_db(settings, args)
    elif args.command == "reset-layout":
        init_storage(settings)
        handle_reset_layout(settings, args)
    elif args.command == "theme-css":
        init_storage(settings)
        handle_theme_css(settings, args)


if __name__ == "__main__":
    main()
