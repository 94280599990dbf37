import logging
import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends, Request
from starlette.responses import Response

from keepclicking.adapters.cookie_storage import CookiePreferenceStorage
from keepclicking.adapters.local_storage import DisabledPreferenceStorage
from keepclicking.app_shell.context import ServiceContext
from keepclicking.components.theme import ThemeStore
from keepclicking.config.loader import load_config
from keepclicking.config.models import SiteConfig
from keepclicking.core.ports.preferences import PreferenceStoragePort
from keepclicking.ui.site import SiteRenderer

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        config_path = Path(os.environ.get("KEEPCLICKING_CONFIG", "site.yaml"))
        self.config_path = config_path if config_path.is_absolute() else self.base_dir / config_path
        self.content_dir = os.environ.get("KEEPCLICKING_CONTENT_DIR") or None
        self.cache_content = os.environ.get("KEEPCLICKING_CACHE_CONTENT", "1") != "0"
        self.static_dir = STATIC_DIR


@lru_cache
def get_settings() -> Settings:
    return Settings()


@lru_cache
def load_context() -> ServiceContext:
    """Build the service context from the environment (once per process)."""
    settings = get_settings()
    config = load_config(settings.config_path)
    logger.info("Site config loaded from %s", settings.config_path)
    return ServiceContext.create(
        config,
        settings.config_path.parent,
        content_dir=settings.content_dir,
        cache=settings.cache_content,
    )


# --- Context ---
def get_context(request: Request) -> ServiceContext:
    context: ServiceContext | None = getattr(request.app.state, "context", None)
    if context is None:
        context = load_context()
        request.app.state.context = context
    return context


def get_site_config(ctx: ServiceContext = Depends(get_context)) -> SiteConfig:
    return ctx.config


def get_site_renderer(ctx: ServiceContext = Depends(get_context)) -> SiteRenderer:
    return ctx.site


# --- Theme ---
def build_preference_storage(request: Request, config: SiteConfig) -> PreferenceStoragePort:
    theme = config.theme
    if theme.persistence == "none":
        return DisabledPreferenceStorage("theme persistence is turned off")
    return CookiePreferenceStorage(
        request.cookies,
        max_age=theme.cookie_max_age_days * 24 * 60 * 60,
        secure=request.url.scheme == "https",
    )


def build_theme_store(storage: PreferenceStoragePort, config: SiteConfig) -> ThemeStore:
    return ThemeStore(
        storage,
        default=config.theme.default_variant,
        key=config.theme.storage_key,
    )


def get_preference_storage(
    request: Request,
    config: SiteConfig = Depends(get_site_config),
) -> PreferenceStoragePort:
    """Request-scoped storage; the same instance is shared within a request."""
    return build_preference_storage(request, config)


def get_theme_store(
    storage: PreferenceStoragePort = Depends(get_preference_storage),
    config: SiteConfig = Depends(get_site_config),
) -> ThemeStore:
    return build_theme_store(storage, config)


def apply_preferences(response: Response, storage: PreferenceStoragePort) -> Response:
    """Send any preference writes made during the request back to the client."""
    if isinstance(storage, CookiePreferenceStorage):
        storage.apply(response)
    return response
