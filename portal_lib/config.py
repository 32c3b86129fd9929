from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import yaml


class PortalError(Exception):
    """Base class for errors raised by portal_lib."""


class ParseError(PortalError, ValueError):
    """Raised when a config cannot be decoded into a Config."""


class ConfigNotFoundError(PortalError, FileNotFoundError):
    """Raised when an explicitly requested config file does not exist."""


@dataclass(frozen=True)
class Link:
    name: str
    url: str
    description: Optional[str] = None
    private: bool = False
    tags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Project:
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    links: Tuple[Link, ...] = ()


@dataclass(frozen=True)
class Config:
    title: Optional[str] = None
    projects: Tuple[Project, ...] = ()

    def all_tags(self) -> List[str]:
        """Return every tag used by any link, deduplicated, in first-seen order."""
        seen: Dict[str, None] = {}
        for project in self.projects:
            for link in project.links:
                for tag in link.tags:
                    seen.setdefault(tag, None)
        return list(seen)


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _tags(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(str(t) for t in value if t is not None)
    return (str(value),)


def _link(name: Any, value: Any, where: str) -> Link:
    # A link value is either a bare url string or a details mapping
    if isinstance(value, str):
        url: Any = value
        details: Mapping[str, Any] = {}
    elif isinstance(value, Mapping):
        url = value.get("url")
        details = value
    else:
        raise ParseError(f"{where}: link {name!r} must be a url string or a mapping")

    if url is None or not str(url).strip():
        raise ParseError(f"{where}: link {name!r} is missing required field 'url'")

    return Link(
        name=str(name),
        url=str(url).strip(),
        description=_optional_str(details.get("description")),
        private=bool(details.get("private", False)),
        tags=_tags(details.get("tags")),
    )


def _links(raw: Any, where: str) -> Tuple[Link, ...]:
    if raw is None:
        return ()
    if isinstance(raw, Mapping):
        return tuple(_link(k, v, where) for k, v in raw.items())
    if isinstance(raw, list):
        links: List[Link] = []
        for index, item in enumerate(raw):
            if not isinstance(item, Mapping):
                raise ParseError(f"{where}: link #{index + 1} must be a mapping with 'name' and 'url'")
            links.append(_link(item.get("name", ""), item, where))
        return tuple(links)
    raise ParseError(f"{where}: 'links' must be a mapping or a list")


def _project(name: Any, body: Any) -> Project:
    if name is None or not str(name).strip():
        raise ParseError("project name must not be empty")
    name = str(name)
    if body is None:
        body = {}
    if not isinstance(body, Mapping):
        raise ParseError(f"project {name!r} must be a mapping")
    where = f"project {name!r}"
    return Project(
        name=name,
        description=_optional_str(body.get("description")),
        icon=_optional_str(body.get("icon")),
        links=_links(body.get("links"), where),
    )


def _projects_from_mapping(raw: Mapping[Any, Any]) -> List[Project]:
    # Shape B: project name -> project body
    return [_project(name, body) for name, body in raw.items()]


def _projects_from_list(raw: Sequence[Any]) -> List[Project]:
    # Shape A: list of {project, links, ...}
    projects: List[Project] = []
    for index, item in enumerate(raw):
        if not isinstance(item, Mapping):
            raise ParseError(f"project #{index + 1} must be a mapping with 'project' and 'links'")
        projects.append(_project(item.get("project"), item))
    return projects


def parse_config(text: str) -> Config:
    """
    Decode YAML text into a Config.

    Both accepted layouts end up in the same model:
    - list form: a sequence of {project, links: [{name, url}, ...]} entries, either as the
      whole document or under a top-level 'projects' key.
    - map form: {title, projects: {<name>: {description, icon, links: {<name>: <url or details>}}}}.

    Raises ParseError for malformed YAML or a link without a url.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ParseError(f"invalid YAML: {e}") from e

    if data is None:
        raise ParseError("config is empty")

    title: Optional[str] = None
    if isinstance(data, Mapping):
        title = _optional_str(data.get("title"))
        raw_projects = data.get("projects")
    elif isinstance(data, list):
        raw_projects = data
    else:
        raise ParseError("config must be a mapping with 'projects' or a list of projects")

    if raw_projects is None:
        projects: List[Project] = []
    elif isinstance(raw_projects, Mapping):
        projects = _projects_from_mapping(raw_projects)
    elif isinstance(raw_projects, list):
        projects = _projects_from_list(raw_projects)
    else:
        raise ParseError("'projects' must be a mapping or a list")

    names = set()
    for project in projects:
        if project.name in names:
            raise ParseError(f"duplicate project name: {project.name!r}")
        names.add(project.name)

    return Config(title=title, projects=tuple(projects))


def load_config(path: str) -> Config:
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise ParseError(f"{path}: invalid UTF-8: {e}") from e
    try:
        return parse_config(text)
    except ParseError as e:
        raise ParseError(f"{path}: {e}") from e


def default_config() -> Config:
    return Config(
        projects=(
            Project(
                name="Example Project",
                links=(Link(name="Example Link", url="https://example.com"),),
            ),
        )
    )


def _link_to_yaml(link: Link) -> Any:
    if not (link.description or link.private or link.tags):
        return link.url
    data: Dict[str, Any] = {"url": link.url}
    if link.private:
        data["private"] = True
    if link.tags:
        data["tags"] = list(link.tags)
    if link.description:
        data["description"] = link.description
    return data


def dump_config(config: Config) -> str:
    """Serialize a Config to YAML in map form, keeping declared order."""
    projects: Dict[str, Any] = {}
    for project in config.projects:
        body: Dict[str, Any] = {}
        if project.description:
            body["description"] = project.description
        if project.icon:
            body["icon"] = project.icon
        body["links"] = {link.name: _link_to_yaml(link) for link in project.links}
        projects[project.name] = body

    data: Dict[str, Any] = {}
    if config.title:
        data["title"] = config.title
    data["projects"] = projects
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
