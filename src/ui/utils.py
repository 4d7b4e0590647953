"""UI utility functions."""

from urllib.parse import urlparse


def is_allowed_image_url(url: str | None, allowed_hosts: list[str]) -> bool:
    """Return True if *url* is an https URL on one of *allowed_hosts*.

    Generated images live on the provider's storage domain; anything else is
    shown as a plain link instead of being embedded.
    """
    if not url:
        return False
    parsed = urlparse(url)
    return parsed.scheme == "https" and parsed.hostname in allowed_hosts
