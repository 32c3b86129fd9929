"""Render a Config into a single self-contained HTML page."""

import html
import logging
import re
import urllib.parse
from typing import List

from .config import Config, Link, Project
from .favicon import get_favicon_url

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "🚪 Portal"

# Schemes that run script when the link is followed
UNSAFE_SCHEMES = ("javascript", "vbscript", "data")
_CONTROL_CHARS = re.compile(r"[\x00-\x20]")

STYLE = """
        body {
            font-family: sans-serif;
            margin: 20px;
            background-color: #0A0A0A;
            color: #D4D4D4;
        }
        .container {
            max-width: 960px;
            margin: 20px auto;
            background-color: #262626;
            padding: 15px;
            border-radius: 8px;
            box-shadow: 0 4px 8px rgba(0,0,0,0.5);
        }
        @media (max-width: 768px) {
            body { margin: 10px; }
            .container { margin: 10px auto; padding: 10px; }
            .links-container { grid-template-columns: 1fr; }
        }
        @media (max-width: 480px) {
            body { margin: 5px; }
            .container { margin: 5px auto; padding: 5px; }
        }
        h1, h3 {
            color: #F5F5F5;
            margin-top: 0;
        }
        .project-card {
            background-color: #262626;
            border: 2px solid #404040;
            border-radius: 8px;
            box-shadow: 0 4px 8px rgba(0,0,0,0.5);
            padding: 15px 20px;
            margin-bottom: 20px;
        }
        .project-header {
            display: flex;
            justify-content: space-between;
            align-items: center;
            margin-bottom: 10px;
        }
        .project-header h3 { margin: 0; }
        .project-icon {
            width: 32px;
            height: 32px;
            border: 1px solid #525252;
            border-radius: 4px;
            padding: 2px;
            display: flex;
            justify-content: center;
            align-items: center;
            font-size: 1.2em;
        }
        .project-description {
            color: #A3A3A3;
            font-size: 0.9em;
            margin-top: 5px;
            margin-bottom: 15px;
        }
        .links-container {
            display: grid;
            grid-template-columns: repeat(auto-fill, minmax(250px, 1fr));
            gap: 15px;
            align-items: stretch;
        }
        .link-card {
            background-color: #404040;
            border: 1px solid #525252;
            border-radius: 6px;
            padding: 10px 15px;
            display: flex;
            box-shadow: 0 2px 4px rgba(0,0,0,0.3);
            transition: transform 0.2s ease-in-out;
            color: #F5F5F5;
            text-decoration: none;
        }
        .link-card:hover {
            transform: translateY(-3px);
            box-shadow: 0 6px 12px rgba(0,0,0,0.6);
        }
        .link-card-content {
            display: flex;
            flex-direction: column;
            align-items: flex-start;
            width: 100%;
        }
        .link-card-main {
            display: flex;
            align-items: center;
            justify-content: space-between;
            width: 100%;
        }
        .link-card-title-group {
            display: flex;
            align-items: center;
        }
        .link-card img {
            margin-right: 10px;
            width: 16px;
            height: 16px;
        }
        .private-icon {
            margin-left: 5px;
            font-size: 0.8em;
            color: #FFD700;
            border: 1px solid #FFD700;
            padding: 2px 4px;
            border-radius: 4px;
        }
        .link-description {
            font-size: 0.8em;
            color: #A3A3A3;
            margin-top: 5px;
            margin-bottom: 8px;
        }
        .link-tag-container {
            display: flex;
            flex-wrap: wrap;
            gap: 5px;
            margin-top: 5px;
            width: 100%;
        }
        .link-tag {
            background-color: #7C2D12;
            color: #FDBA74;
            border: 1px solid #FDBA74;
            padding: 2px 8px;
            border-radius: 9999px;
            font-size: 0.7em;
        }
        .filters {
            display: flex;
            flex-wrap: wrap;
            gap: 10px;
            margin-bottom: 20px;
        }
        .filters input[type="text"],
        .filters select {
            flex: 1;
            min-width: 150px;
            padding: 8px;
            border-radius: 5px;
            border: 1px solid #404040;
            background-color: #262626;
            color: #D4D4D4;
        }
        .filters input[type="text"]::placeholder { color: #A3A3A3; }
"""

SCRIPT = """
        const searchBar = document.getElementById('search-bar');
        const tagFilter = document.getElementById('tag-filter');
        const projectCards = document.querySelectorAll('.project-card');

        function filterLinks() {
            const searchTerm = searchBar.value.toLowerCase();
            const selectedTag = tagFilter.value;

            projectCards.forEach(projectCard => {
                let visible = false;
                projectCard.querySelectorAll('.link-card').forEach(linkCard => {
                    const linkName = linkCard.querySelector('.link-card-main').textContent.toLowerCase();
                    const linkTags = Array.from(linkCard.querySelectorAll('.link-tag')).map(el => el.textContent);
                    const matches = linkName.includes(searchTerm)
                        && (selectedTag === '' || linkTags.includes(selectedTag));
                    linkCard.style.display = matches ? 'flex' : 'none';
                    visible = visible || matches;
                });
                projectCard.style.display = visible ? 'block' : 'none';
            });
        }

        searchBar.addEventListener('input', filterLinks);
        tagFilter.addEventListener('change', filterLinks);
"""


def _e(value: str) -> str:
    return html.escape(value, quote=True)


def _is_image_icon(icon: str) -> bool:
    return icon.startswith(("http://", "https://"))


def safe_href(url: str) -> str:
    """Return ``url`` for use in href, or "#" when it would execute script."""
    # Browsers ignore whitespace and control characters inside the scheme
    try:
        scheme = urllib.parse.urlsplit(_CONTROL_CHARS.sub("", url)).scheme.lower()
    except ValueError:
        return url
    if scheme in UNSAFE_SCHEMES:
        logger.warning("Unsafe link url replaced with '#': %s", url)
        return "#"
    return url


def render_link(link: Link) -> str:
    favicon = get_favicon_url(link.url)
    parts: List[str] = [f'<a href="{_e(safe_href(link.url))}" class="link-card">']
    parts.append('<div class="link-card-content">')
    parts.append('<div class="link-card-main">')
    parts.append('<div class="link-card-title-group">')
    if favicon:
        parts.append(f'<img src="{_e(favicon)}" alt="" width="16" height="16">')
    parts.append(f"<span>{_e(link.name)}</span>")
    parts.append("</div>")
    if link.private:
        parts.append('<span class="private-icon">🔒</span>')
    parts.append("</div>")
    if link.description:
        parts.append(f'<div class="link-description">{_e(link.description)}</div>')
    if link.tags:
        chips = "".join(f'<span class="link-tag">{_e(tag)}</span>' for tag in link.tags)
        parts.append(f'<div class="link-tag-container">{chips}</div>')
    parts.append("</div>")
    parts.append("</a>")
    return "".join(parts)


def render_project(project: Project) -> str:
    icon = ""
    if project.icon:
        if _is_image_icon(project.icon):
            icon = f'<img src="{_e(project.icon)}" alt="" class="project-icon">'
        else:
            icon = f'<span class="project-icon">{_e(project.icon)}</span>'
    description = ""
    if project.description:
        description = f'<p class="project-description">{_e(project.description)}</p>'
    links = "\n".join(render_link(link) for link in project.links)
    return f"""
        <div class="project-card">
            <div class="project-header">
                <h3>{_e(project.name)}</h3>
                {icon}
            </div>
            {description}
            <div class="links-container">
{links}
            </div>
        </div>"""


def render_html(config: Config) -> str:
    """
    Render the whole page for ``config``.

    User-supplied text is HTML-escaped. Output depends only on the Config, so the same
    Config always renders to the same string.
    """
    title = _e(config.title or DEFAULT_TITLE)
    options = "".join(f'<option value="{_e(tag)}">{_e(tag)}</option>' for tag in config.all_tags())
    projects = "".join(render_project(project) for project in config.projects)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <style>{STYLE}    </style>
</head>
<body>
    <div class="container">
        <h1>{title}</h1>
        <div class="filters">
            <input type="text" id="search-bar" placeholder="Search links...">
            <select id="tag-filter">
                <option value="">All Tags</option>{options}
            </select>
        </div>
        <div id="projects">{projects}
        </div>
    </div>
    <script>{SCRIPT}    </script>
</body>
</html>
"""
