"""
Theme component - Light/dark theme preference store.
"""

from ._impl import (
    DEFAULT_STORAGE_KEY,
    DEFAULT_THEME,
    InvalidThemeError,
    ThemeStore,
    create_theme_store,
    is_theme,
    opposite,
    validate_theme,
)
from .component import run, run_read, run_set, run_toggle
from .models import (
    ReadThemeInput,
    ReadThemeOutput,
    SetThemeInput,
    SetThemeOutput,
    ToggleThemeInput,
)
from .ports import PreferenceStoragePort, ThemeStorePort, ThemeSubscriber

__all__ = [
    # Component entry points
    "run",
    "run_read",
    "run_set",
    "run_toggle",
    # Models
    "ReadThemeInput",
    "ReadThemeOutput",
    "SetThemeInput",
    "SetThemeOutput",
    "ToggleThemeInput",
    # Ports
    "PreferenceStoragePort",
    "ThemeStorePort",
    "ThemeSubscriber",
    # Store
    "ThemeStore",
    "InvalidThemeError",
    "create_theme_store",
    "is_theme",
    "opposite",
    "validate_theme",
    # Constants
    "DEFAULT_STORAGE_KEY",
    "DEFAULT_THEME",
]
