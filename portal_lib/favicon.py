import logging
import urllib.parse

logger = logging.getLogger(__name__)

FAVICON_SERVICE = "https://www.google.com/s2/favicons?domain="


def get_favicon_url(url: str) -> str:
    """
    Return the favicon service URL for the host of ``url``.

    Only the hostname is forwarded. Malformed URLs (no scheme or no host) log a
    warning and yield an empty string, which means "no favicon".
    """
    try:
        parts = urllib.parse.urlsplit(str(url).strip())
        host = parts.hostname
    except ValueError:
        parts, host = None, None
    if not parts or not parts.scheme or not host:
        logger.warning("Invalid URL for favicon: %s", url)
        return ""
    return f"{FAVICON_SERVICE}{host}"
