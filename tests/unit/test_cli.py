import pytest
from fakes import RULES_PATH

from storefront.app_shell import cli


def _run(tmp_path, *args):
    cli.main(["--rules", str(RULES_PATH), "--data-dir", str(tmp_path), *args])


def test_init_db(tmp_path, capsys):
    _run(tmp_path, "init-db")
    assert (tmp_path / "storefront.db").exists()
    assert "Database ready" in capsys.readouterr().out


def test_theme_css_prints_default_tokens(tmp_path, capsys):
    _run(tmp_path, "theme-css")
    out = capsys.readouterr().out
    assert out.startswith(":root {")
    assert "--color-primary: #2c251f;" in out
    assert "--color-primary-deep: #18110b;" in out
    assert "navbar-layout" not in out


def test_theme_css_to_file(tmp_path):
    target = tmp_path / "theme.css"
    _run(tmp_path, "theme-css", "--output", str(target))
    assert "--radius: 2px;" in target.read_text(encoding="utf-8")


def test_reset_layout(tmp_path, capsys):
    _run(tmp_path, "reset-layout")
    assert "hero, categories, featured, banner, trust" in capsys.readouterr().out


def test_missing_rules_file(tmp_path):
    with pytest.raises(SystemExit):
        cli.main(["--rules", str(tmp_path / "none.yaml"), "theme-css"])


def test_rollback_db(tmp_path, capsys):
    _run(tmp_path, "init-db")
    _run(tmp_path, "rollback-db")
    assert "Rolled back 001_initial.sql" in capsys.readouterr().out
    _run(tmp_path, "rollback-db")
    assert "Nothing to roll back" in capsys.readouterr().out
