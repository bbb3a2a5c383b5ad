"""
Config component - Site configuration store.
"""

from ._impl import ConfigListener, ConfigStatus, ConfigStore, build_save_payload, validate_update_keys
from .component import run, run_load, run_save
from .models import (
    ConfigValidationError,
    LoadConfigInput,
    LoadConfigOutput,
    SaveConfigInput,
    SaveConfigOutput,
)

__all__ = [
    # Component entry points
    "run",
    "run_load",
    "run_save",
    # Store
    "ConfigStore",
    "ConfigStatus",
    "ConfigListener",
    "build_save_payload",
    "validate_update_keys",
    # Models
    "LoadConfigInput",
    "LoadConfigOutput",
    "SaveConfigInput",
    "SaveConfigOutput",
    "ConfigValidationError",
]
