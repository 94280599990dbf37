import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from keepclicking.config.models import SiteConfig


_FENCED_YAML_RE = re.compile(r"^```ya?ml[ \t]*\n(.*?)^```", re.MULTILINE | re.DOTALL)


def _strip_fences(content: str) -> str:
    # Accept config kept in a ```yaml block inside a README; first block wins
    match = _FENCED_YAML_RE.search(content)
    return match.group(1) if match else content


def parse_config(content: str) -> SiteConfig:
    """
    Parse and validate site configuration text.
    Raises ValueError if the YAML or the schema is invalid.
    """
    try:
        data = yaml.safe_load(_strip_fences(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in site config: {e}") from e

    try:
        return SiteConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Site config validation failed:\n{e}") from e


def load_config(path: Path) -> SiteConfig:
    """
    Load and validate the site configuration file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Site config not found at: {path}")

    with open(path) as f:
        content = f.read()

    return parse_config(content)


def content_root(config: SiteConfig, base_dir: Path, override: str | None = None) -> Path:
    """Resolve the content directory, relative paths against base_dir."""
    root = Path(override) if override else Path(config.content.root)
    if not root.is_absolute():
        root = base_dir / root
    return root
