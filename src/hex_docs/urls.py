from __future__ import annotations

from urllib.parse import ParseResult, quote, urlparse, urlunparse


def normalize_url(raw_url: str) -> str:
    """Normalize a URL before it goes on the wire.

    - Lowercases scheme + hostname.
    - Strips fragments.
    """

    parsed: ParseResult = urlparse(raw_url)
    parsed = parsed._replace(
        scheme=(parsed.scheme or "").lower(),
        netloc=(parsed.netloc or "").lower(),
        fragment="",
    )
    return urlunparse(parsed)


def docs_archive_name(name: str, version: str) -> str:
    return f"{name}-{version}.tar.gz"


def docs_archive_url(repo_url: str, name: str, version: str) -> str:
    return f"{repo_url.rstrip('/')}/docs/{docs_archive_name(name, version)}"


def release_docs_url(api_url: str, name: str, version: str) -> str:
    return (
        f"{api_url.rstrip('/')}/packages/{quote(name, safe='')}"
        f"/releases/{quote(version, safe='')}/docs"
    )
