from __future__ import annotations

import io
import tarfile
from pathlib import Path

import pytest

from hex_docs.config import Settings
from hex_docs.http_client import HttpClient


class FakeResponse:
    def __init__(
        self,
        status_code: int = 200,
        body: bytes = b"",
        headers: dict[str, str] | None = None,
        url: str = "",
    ) -> None:
        self.status_code = status_code
        self.content = body
        self.headers = dict(headers or {})
        self.url = url
        self.closed = False

    def iter_content(self, chunk_size: int = 1):
        for i in range(0, len(self.content), chunk_size):
            yield self.content[i : i + chunk_size]

    def close(self) -> None:
        self.closed = True


class FakeSession:
    """Stands in for requests.Session; responses are keyed by (method, url)."""

    def __init__(self) -> None:
        self.responses: dict[tuple[str, str], FakeResponse] = {}
        self.calls: list[dict] = []

    def add(self, method: str, url: str, response: FakeResponse) -> None:
        response.url = url
        self.responses[(method, url)] = response

    def _respond(self, method: str, url: str, **kwargs) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        try:
            return self.responses[(method, url)]
        except KeyError:
            return FakeResponse(404, b"Not Found", url=url)

    def get(self, url: str, **kwargs) -> FakeResponse:
        return self._respond("GET", url, **kwargs)

    def delete(self, url: str, **kwargs) -> FakeResponse:
        return self._respond("DELETE", url, **kwargs)


class RecordingBrowser:
    def __init__(self) -> None:
        self.opened: list[Path] = []

    def open_in_browser(self, path: Path) -> None:
        self.opened.append(path)


def make_tarball(files: dict[str, bytes]) -> bytes:
    buf = io.BytesIO()
    with tarfile.open(fileobj=buf, mode="w:gz") as tar:
        for name, data in files.items():
            info = tarfile.TarInfo(name)
            info.size = len(data)
            tar.addfile(info, io.BytesIO(data))
    return buf.getvalue()


INDEX_HTML = (
    b"<html><head><title>foo v1.2.3 - Documentation</title></head>"
    b"<body><h1>foo</h1></body></html>"
)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(home=tmp_path / "hex", api_key="secret-key")


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def http(session: FakeSession) -> HttpClient:
    return HttpClient(session, timeout_s=5)  # type: ignore[arg-type]


@pytest.fixture
def browser() -> RecordingBrowser:
    return RecordingBrowser()


@pytest.fixture
def docs_tarball() -> bytes:
    return make_tarball(
        {
            "index.html": INDEX_HTML,
            "api-reference.html": b"<html></html>",
            "dist/app.js": b"console.log(1)",
        }
    )


@pytest.fixture
def tarball_factory():
    return make_tarball


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    root = tmp_path / "proj"
    root.mkdir()
    (root / "pyproject.toml").write_text(
        '[project]\nname = "my_app"\nversion = "0.4.0"\n', encoding="utf-8"
    )
    return root


@pytest.fixture
def fake_response():
    return FakeResponse
