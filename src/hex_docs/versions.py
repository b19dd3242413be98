from __future__ import annotations

import re

from .errors import VersionError

# MAJOR.MINOR.PATCH[-PRE][+BUILD]
_VERSION_RE = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?$"
)


def clean_version(raw: str) -> str:
    """Return the canonical form of ``raw`` (``v`` prefix and whitespace dropped).

    Raises VersionError when the result is not a semantic version.
    """

    version = raw.strip()
    if version[:1] in {"v", "V"}:
        version = version[1:]
    if not _VERSION_RE.match(version):
        raise VersionError(f"Invalid version: {raw}")
    return version
