"""
Config component - Site configuration load/save.

Provides the functional shell over ConfigStore: errors come back in the
output object instead of being raised.
"""

from __future__ import annotations

from pydantic import ValidationError

from storefront.domain.errors import ConfigLoadError, ConfigSaveError

from ._impl import ConfigStore, validate_update_keys
from .models import (
    ConfigValidationError,
    LoadConfigInput,
    LoadConfigOutput,
    SaveConfigInput,
    SaveConfigOutput,
)


def _parse_pydantic_errors(exc: ValidationError) -> list[ConfigValidationError]:
    """Flatten a pydantic ValidationError into field-specific errors."""
    errors: list[ConfigValidationError] = []
    for error in exc.errors():
        loc = error.get("loc", ())
        field = ".".join(str(part) for part in loc) if loc else "_schema"
        code = "required" if "missing" in error.get("type", "") else "invalid_value"
        msg = error.get("msg", "Invalid value")
        errors.append(ConfigValidationError(field=field, code=code, message=f"Field '{field}': {msg}"))
    return errors


def run_load(inp: LoadConfigInput, *, store: ConfigStore) -> LoadConfigOutput:
    """
    Load the configuration document into the store.

    Args:
        inp: Input (empty for load operation).
        store: The config store to populate.

    Returns:
        LoadConfigOutput with the normalized document, or the load error.
    """
    try:
        config = store.load()
    except ConfigLoadError as e:
        return LoadConfigOutput(config=None, error=str(e), success=False)
    return LoadConfigOutput(config=config)


def run_save(inp: SaveConfigInput, *, store: ConfigStore) -> SaveConfigOutput:
    """
    Save a full document or a partial update.

    Args:
        inp: Input containing the document or the updates dictionary.
        store: The config store to save through.

    Returns:
        SaveConfigOutput with the server's document, or validation/save errors.
    """
    current = store.config if store.is_ready else None

    if isinstance(inp.updates, dict):
        errors = validate_update_keys(inp.updates)
        if errors:
            return SaveConfigOutput(config=current, errors=errors, success=False)

    try:
        saved = store.save(inp.updates)
    except ConfigSaveError as e:
        cause = e.__cause__
        if isinstance(cause, ValidationError):
            errors = _parse_pydantic_errors(cause)
        else:
            errors = [ConfigValidationError(field="_save", code="save_failed", message=str(e))]
        return SaveConfigOutput(config=current, errors=errors, success=False)

    return SaveConfigOutput(config=saved)


def run(
    inp: LoadConfigInput | SaveConfigInput,
    *,
    store: ConfigStore,
) -> LoadConfigOutput | SaveConfigOutput:
    """
    Main entry point for the config component.

    Dispatches to the appropriate handler based on input type.
    """
    if isinstance(inp, LoadConfigInput):
        return run_load(inp, store=store)
    elif isinstance(inp, SaveConfigInput):
        return run_save(inp, store=store)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
