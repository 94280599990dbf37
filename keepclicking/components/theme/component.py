"""
Theme component - Light/dark preference read/write.

Thin entry points over ThemeStore so callers that prefer the
input/output style (CLI, HTTP routes) get the same behavior as the
layout, which talks to the store directly.
"""

from __future__ import annotations

from ._impl import ThemeStore
from .models import (
    ReadThemeInput,
    ReadThemeOutput,
    SetThemeInput,
    SetThemeOutput,
    ToggleThemeInput,
)

# --- Component Entry Points ---


def run_read(
    inp: ReadThemeInput,
    *,
    store: ThemeStore,
) -> ReadThemeOutput:
    """
    Read the current theme.

    Always succeeds; falls back to the store's default when nothing
    is persisted or storage is unavailable.
    """
    return ReadThemeOutput(theme=store.read())


def run_set(
    inp: SetThemeInput,
    *,
    store: ThemeStore,
) -> SetThemeOutput:
    """
    Set the theme.

    Args:
        inp: Input containing the new variant.
        store: Theme store to update.

    Returns:
        SetThemeOutput with the new variant and whether it was persisted.

    Raises:
        InvalidThemeError: If the variant is not "light" or "dark".
    """
    persisted = store.set(inp.theme)
    return SetThemeOutput(theme=store.read(), persisted=persisted)


def run_toggle(
    inp: ToggleThemeInput,
    *,
    store: ThemeStore,
) -> SetThemeOutput:
    """Flip the theme between light and dark."""
    persisted = store.toggle()
    return SetThemeOutput(theme=store.read(), persisted=persisted)


def run(
    inp: ReadThemeInput | SetThemeInput | ToggleThemeInput,
    *,
    store: ThemeStore,
) -> ReadThemeOutput | SetThemeOutput:
    """
    Main entry point for the theme component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, ReadThemeInput):
        return run_read(inp, store=store)
    elif isinstance(inp, SetThemeInput):
        return run_set(inp, store=store)
    elif isinstance(inp, ToggleThemeInput):
        return run_toggle(inp, store=store)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
