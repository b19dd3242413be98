"""hex-docs core library.

Fetch, open and revert package documentation hosted on the Hex docs service.

Layout:
- Docs for one package version live under ``<HEX_HOME>/docs/<name>/<version>``.
- Archives come from ``<repo>/docs/<name>-<version>.tar.gz``.
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
