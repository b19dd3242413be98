from __future__ import annotations

import hashlib
import json
import time
from dataclasses import asdict, dataclass
from pathlib import Path

from .errors import FilesystemError

RECORD_FILE = ".hex_docs.json"


def utc_iso() -> str:
    return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime())


@dataclass(frozen=True)
class FetchRecord:
    name: str
    version: str
    url: str
    archive: str
    size: int
    sha256: str
    fetched_at: str

    @classmethod
    def for_body(
        cls, *, name: str, version: str, url: str, archive: str, body: bytes
    ) -> FetchRecord:
        return cls(
            name=name,
            version=version,
            url=url,
            archive=archive,
            size=len(body),
            sha256=hashlib.sha256(body).hexdigest(),
            fetched_at=utc_iso(),
        )


def write_record(docs_dir: Path, record: FetchRecord) -> Path:
    path = docs_dir / RECORD_FILE
    try:
        path.write_text(
            json.dumps(asdict(record), indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
    except OSError as e:
        raise FilesystemError(f"Failed to write {path}: {e}") from e
    return path


def read_record(docs_dir: Path) -> FetchRecord | None:
    path = docs_dir / RECORD_FILE
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return FetchRecord(**data)
    except (OSError, json.JSONDecodeError, UnicodeDecodeError, TypeError):
        return None
