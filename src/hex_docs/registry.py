from __future__ import annotations

from .config import Settings
from .errors import RegistryError


def ensure_registry(settings: Settings) -> None:
    """Make sure the local Hex home (and its docs root) is usable."""
    try:
        settings.docs_root.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise RegistryError(
            f"Hex home is not usable: {settings.home}: {e}"
        ) from e
    if not settings.docs_root.is_dir():
        raise RegistryError(f"Docs root is not a directory: {settings.docs_root}")
