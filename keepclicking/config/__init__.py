from keepclicking.config.loader import content_root, load_config, parse_config
from keepclicking.config.models import (
    CommentsConfig,
    ContentConfig,
    PagesConfig,
    SiteConfig,
    ThemeConfig,
)

__all__ = [
    "CommentsConfig",
    "ContentConfig",
    "PagesConfig",
    "SiteConfig",
    "ThemeConfig",
    "content_root",
    "load_config",
    "parse_config",
]
