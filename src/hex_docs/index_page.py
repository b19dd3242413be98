from __future__ import annotations

from pathlib import Path

from bs4 import BeautifulSoup


def extract_title(html: str) -> str | None:
    soup = BeautifulSoup(html, "html.parser")
    if soup.title and soup.title.get_text(strip=True):
        return soup.title.get_text(" ", strip=True)
    h1 = soup.find("h1")
    if h1 and h1.get_text(strip=True):
        return h1.get_text(" ", strip=True)
    return None


def index_title(index_path: Path) -> str | None:
    try:
        html = index_path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return None
    return extract_title(html)
