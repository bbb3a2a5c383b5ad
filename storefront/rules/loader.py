import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from storefront.rules.models import StoreRules

# First fenced yaml block of a markdown document
_FENCED_YAML = re.compile(r"^```ya?ml[ \t]*\n(.*?)^```", re.MULTILINE | re.DOTALL)


def extract_yaml(text: str) -> str:
    """Rules may live in a plain YAML file or inside a ```yaml fence of a markdown file."""
    match = _FENCED_YAML.search(text)
    return match.group(1) if match else text


def parse_rules(text: str) -> StoreRules:
    """
    Validate rules from their text form.

    Raises:
        ValueError: If the YAML or the schema is invalid.
    """
    try:
        data = yaml.safe_load(extract_yaml(text))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        return StoreRules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e


def load_rules(path: Path) -> StoreRules:
    """
    Load the storefront rules file.

    Raises:
        FileNotFoundError: If the file is missing.
        ValueError: If the YAML or the schema is invalid.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Rules file not found at: {path}")
    return parse_rules(path.read_text(encoding="utf-8"))
