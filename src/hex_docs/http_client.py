from __future__ import annotations

from dataclasses import dataclass

import requests
from requests import exceptions as req_exc
from tqdm import tqdm

from . import __version__
from .errors import RemoteError
from .urls import normalize_url

USER_AGENT = f"hex-docs/{__version__}"
CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class HttpResponse:
    url: str
    status_code: int
    headers: dict[str, str]
    body: bytes

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class HttpClient:
    def __init__(self, session: requests.Session, *, timeout_s: int = 45) -> None:
        self._session = session
        self._timeout_s = timeout_s

    def _headers(self, extra: dict[str, str] | None) -> dict[str, str]:
        headers = {"User-Agent": USER_AGENT}
        if extra:
            headers.update(extra)
        return headers

    def get(
        self,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        progress: bool = False,
    ) -> HttpResponse:
        normalized = normalize_url(url)
        try:
            resp = self._session.get(
                normalized,
                timeout=self._timeout_s,
                headers=self._headers(headers),
                stream=progress,
            )
            try:
                if progress and 200 <= resp.status_code < 300:
                    desc = normalized.rsplit("/", 1)[-1]
                    body = _read_with_progress(resp, desc=desc)
                else:
                    body = resp.content
            finally:
                resp.close()
        except req_exc.RequestException as e:
            raise RemoteError(f"GET {normalized} failed: {e}") from e

        return HttpResponse(
            url=normalized,
            status_code=int(resp.status_code),
            headers={k: str(v) for k, v in resp.headers.items()},
            body=body,
        )

    def delete(
        self,
        url: str,
        *,
        headers: dict[str, str] | None = None,
    ) -> HttpResponse:
        normalized = normalize_url(url)
        try:
            resp = self._session.delete(
                normalized,
                timeout=self._timeout_s,
                headers=self._headers(headers),
            )
        except req_exc.RequestException as e:
            raise RemoteError(f"DELETE {normalized} failed: {e}") from e

        return HttpResponse(
            url=normalized,
            status_code=int(resp.status_code),
            headers={k: str(v) for k, v in resp.headers.items()},
            body=resp.content,
        )


def _read_with_progress(resp: requests.Response, *, desc: str) -> bytes:
    total_raw = resp.headers.get("Content-Length")
    total = int(total_raw) if total_raw and total_raw.isdigit() else None
    chunks: list[bytes] = []
    with tqdm(total=total, desc=desc, unit="B", unit_scale=True) as bar:
        for chunk in resp.iter_content(chunk_size=CHUNK_SIZE):
            if not chunk:
                continue
            chunks.append(chunk)
            bar.update(len(chunk))
    return b"".join(chunks)


def fetch_remote_file(http: HttpClient, url: str, *, progress: bool = False) -> bytes:
    """GET ``url`` and return its body; RemoteError on any non-2xx response."""
    result = http.get(url, progress=progress)
    if not result.ok:
        detail = result.text().strip() or "(empty body)"
        raise RemoteError(
            f"{result.status_code} {detail}",
            status_code=result.status_code,
            body=result.body,
        )
    return result.body
