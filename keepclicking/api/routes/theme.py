"""Theme preference endpoints: JSON API and the toggle form fallback."""

from fastapi import APIRouter, Depends, Form
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import BaseModel

from keepclicking.api.deps import apply_preferences, get_preference_storage, get_theme_store
from keepclicking.components.theme import (
    ReadThemeInput,
    SetThemeInput,
    ThemeStore,
    run_read,
    run_set,
)
from keepclicking.core.ports.preferences import PreferenceStoragePort
from keepclicking.domain.entities import ThemeVariant

router = APIRouter()
toggle_router = APIRouter()


class ThemeResponse(BaseModel):
    theme: ThemeVariant


class ThemeUpdate(BaseModel):
    theme: ThemeVariant


class ThemeUpdateResponse(BaseModel):
    theme: ThemeVariant
    persisted: bool


def safe_next_path(next_path: str | None) -> str:
    """Only redirect to paths on this site."""
    if not next_path or not next_path.startswith("/") or next_path.startswith("//"):
        return "/"
    if "\\" in next_path:
        return "/"
    return next_path


@router.get("", response_model=ThemeResponse)
def get_theme(store: ThemeStore = Depends(get_theme_store)) -> ThemeResponse:
    """Current theme for this visitor (the configured default if none is stored)."""
    result = run_read(ReadThemeInput(), store=store)
    return ThemeResponse(theme=result.theme)


@router.put("", response_model=ThemeUpdateResponse)
def put_theme(
    body: ThemeUpdate,
    store: ThemeStore = Depends(get_theme_store),
    storage: PreferenceStoragePort = Depends(get_preference_storage),
) -> JSONResponse:
    """
    Set the theme.

    The new value is persisted as a cookie. When persistence is turned
    off the value is echoed back with persisted=false.
    """
    result = run_set(SetThemeInput(theme=body.theme), store=store)
    response = JSONResponse(
        ThemeUpdateResponse(theme=result.theme, persisted=result.persisted).model_dump()
    )
    return apply_preferences(response, storage)


@toggle_router.post("/theme/toggle")
def toggle_theme(
    checked: str | None = Form(None),
    next_path: str | None = Form(None, alias="next"),
    store: ThemeStore = Depends(get_theme_store),
    storage: PreferenceStoragePort = Depends(get_preference_storage),
) -> RedirectResponse:
    """
    Form fallback for the header toggle.

    A checked box means dark. Browsers leave unchecked boxes out of the
    form entirely, which means light.
    """
    theme: ThemeVariant = "dark" if checked else "light"
    run_set(SetThemeInput(theme=theme), store=store)

    response = RedirectResponse(url=safe_next_path(next_path), status_code=303)
    apply_preferences(response, storage)
    return response
