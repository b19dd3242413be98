from __future__ import annotations

import gzip
import io
import tarfile
import zlib
from pathlib import Path, PurePosixPath, PureWindowsPath

from .errors import ArchiveError, FilesystemError


def write_archive(path: Path, data: bytes) -> Path:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as e:
        raise FilesystemError(f"Failed to write {path}: {e}") from e
    return path


def _decompress(archive_path: Path) -> bytes:
    try:
        raw = archive_path.read_bytes()
    except OSError as e:
        raise FilesystemError(f"Failed to read {archive_path}: {e}") from e
    # Inflates the whole stream so the gzip trailer (CRC, size) is checked.
    try:
        return gzip.decompress(raw)
    except (gzip.BadGzipFile, zlib.error, EOFError) as e:
        raise ArchiveError(
            f"Invalid documentation archive {archive_path}: {e}"
        ) from e


def _is_unsafe_name(name: str) -> bool:
    if PurePosixPath(name).is_absolute() or PureWindowsPath(name).anchor:
        return True
    return ".." in PurePosixPath(name.replace("\\", "/")).parts


def extract_archive(archive_path: Path, dest_dir: Path) -> list[str]:
    """Extract a gzip tarball into ``dest_dir``, overwriting existing files.

    Member paths are kept relative to ``dest_dir``. Absolute members, ``..``
    members and links pointing outside ``dest_dir`` are rejected. Returns the
    extracted regular-file paths (POSIX, relative).
    """

    data = _decompress(archive_path)
    try:
        with tarfile.open(fileobj=io.BytesIO(data), mode="r:") as tar:
            members = tar.getmembers()
            for m in members:
                if _is_unsafe_name(m.name):
                    raise ArchiveError(
                        f"Refusing unsafe archive member in {archive_path}: "
                        f"{m.name}"
                    )
            tar.extractall(dest_dir, filter="data")
    except tarfile.FilterError as e:
        raise ArchiveError(
            f"Refusing unsafe archive member in {archive_path}: {e}"
        ) from e
    except (tarfile.TarError, EOFError) as e:
        raise ArchiveError(
            f"Invalid documentation archive {archive_path}: {e}"
        ) from e
    except OSError as e:
        raise FilesystemError(f"Failed to extract {archive_path}: {e}") from e

    return sorted(
        Path(m.name).as_posix() for m in members if m.isfile()
    )
