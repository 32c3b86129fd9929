"""
portal_lib: build a static HTML index page of projects and their links from a YAML file.

Public API:
- parse_config(text: str) -> Config
- load_config(path: str) -> Config
- get_favicon_url(url: str) -> str
- render_html(config: Config) -> str
- build_portal(config_path: str) -> str

The config may be written in two layouts:
- list form: a sequence of {project, links: [{name, url}, ...]} entries.
- map form: {title, projects: {<name>: {description, icon, links: {<name>: url | {url, private, tags, description}}}}}.

Both are normalized into the same immutable Config/Project/Link model before rendering.
The generated page is self-contained: inline CSS, favicons from a favicon service, and a
small script for the search box and tag filter.
"""
from .config import (
    Config,
    ConfigNotFoundError,
    Link,
    ParseError,
    PortalError,
    Project,
    default_config,
    dump_config,
    load_config,
    parse_config,
)
from .favicon import get_favicon_url
from .generator import (
    DEFAULT_CONFIG_NAME,
    OUTPUT_NAME,
    build_portal,
    ensure_config,
    output_path_for,
    resolve_config_path,
)
from .renderer import render_html

__all__ = [
    "Config",
    "Project",
    "Link",
    "PortalError",
    "ParseError",
    "ConfigNotFoundError",
    "parse_config",
    "load_config",
    "default_config",
    "dump_config",
    "get_favicon_url",
    "render_html",
    "DEFAULT_CONFIG_NAME",
    "OUTPUT_NAME",
    "resolve_config_path",
    "ensure_config",
    "output_path_for",
    "build_portal",
]
