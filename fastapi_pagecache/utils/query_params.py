"""Helpers for reading query parameters out of relation URLs."""

from __future__ import annotations

from urllib.parse import unquote_plus


def _split_query(url: str) -> list[str]:
    query = url[url.rfind("?") + 1 :] if "?" in url else ""
    query = query.split("#", 1)[0]
    return [part for part in query.split("&") if part]


def extract_param(url: str | None, name: str) -> str | None:
    """Return the first URL-decoded value of ``name`` in the query of ``url``."""
    if not url or not name:
        return None
    for item in _split_query(url):
        key, _, value = item.partition("=")
        if unquote_plus(key) == name:
            return unquote_plus(value)
    return None


def extract_int_param(url: str | None, name: str) -> int:
    """Return ``name`` as a non-negative integer, or 0 when absent or invalid."""
    value = extract_param(url, name)
    if value is None:
        return 0
    try:
        number = int(value.strip())
    except ValueError:
        return 0
    return max(number, 0)
