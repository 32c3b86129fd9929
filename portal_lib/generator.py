import os
from typing import Optional

from .config import ConfigNotFoundError, default_config, dump_config, load_config
from .renderer import render_html

DEFAULT_CONFIG_NAME = "portal.yml"
OUTPUT_NAME = "index.html"


def resolve_config_path(path: Optional[str] = None) -> str:
    """Return the absolute config path: ``path`` if given, else ./portal.yml."""
    if path:
        return os.path.abspath(os.path.expanduser(path))
    return os.path.join(os.getcwd(), DEFAULT_CONFIG_NAME)


def ensure_config(config_path: str) -> bool:
    """
    Make sure a config file exists at ``config_path``.

    - Existing file: nothing to do, returns False.
    - Missing file named portal.yml: writes the example config and returns True.
    - Any other missing file: raises ConfigNotFoundError.
    """
    if os.path.isfile(config_path):
        return False
    if os.path.basename(config_path) != DEFAULT_CONFIG_NAME:
        raise ConfigNotFoundError(f"YAML file not found at {config_path}")
    with open(config_path, "w", encoding="utf-8") as f:
        f.write(dump_config(default_config()))
    return True


def output_path_for(config_path: str) -> str:
    return os.path.join(os.path.dirname(os.path.abspath(config_path)), OUTPUT_NAME)


def build_portal(config_path: str) -> str:
    """
    Generate index.html next to ``config_path`` and return its path.

    The page is rendered in memory before anything is written, so a config that fails
    to load leaves any previous index.html untouched.
    """
    ensure_config(config_path)
    config = load_config(config_path)
    page = render_html(config)

    out_path = output_path_for(config_path)
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(page)
    return out_path
