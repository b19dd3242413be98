"""Docs command dispatcher: revert, open and fetch package documentation."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from .api import auth_headers, format_error_result, release_docs_delete
from .archive import extract_archive, write_archive
from .browser import Browser
from .config import Settings, docs_directory
from .errors import NotFoundError, RemoteError, UsageError
from .http_client import HttpClient, fetch_remote_file
from .index_page import index_title
from .manifest import FetchRecord, read_record, write_record
from .project import ProjectConfig
from .registry import ensure_registry
from .urls import docs_archive_name, docs_archive_url
from .versions import clean_version

USAGE = (
    "Invalid arguments, expected one of:\n"
    "hex-docs open --package [PackageName] --version [PackageVersion]\n"
    "hex-docs fetch --package [PackageName] --version [PackageVersion]\n"
    "hex-docs --revert [PackageVersion]"
)


@dataclass(frozen=True)
class DocsTarget:
    package_name: str
    package_version: str

    def __post_init__(self) -> None:
        if not self.package_name.strip():
            raise UsageError("Package name must not be empty")
        if not self.package_version.strip():
            raise UsageError("Package version must not be empty")
        for label, value in (
            ("name", self.package_name),
            ("version", self.package_version),
        ):
            if "/" in value or "\\" in value or ".." in value:
                raise UsageError(f"Invalid package {label}: {value}")


@dataclass(frozen=True)
class DocsOptions:
    revert: str | None = None
    progress: bool = False
    package: str | None = None
    version: str | None = None
    args: tuple[str, ...] = ()


def resolve_target(
    options: DocsOptions, project: Callable[[], ProjectConfig]
) -> DocsTarget:
    """Flags win; the current project fills in whatever was not given."""
    if options.package is not None and options.version is not None:
        return DocsTarget(options.package, options.version)
    config = project()
    return DocsTarget(
        package_name=(
            options.package if options.package is not None else config.name
        ),
        package_version=(
            options.version if options.version is not None else config.version
        ),
    )


def fetch_docs(
    http: HttpClient,
    settings: Settings,
    target: DocsTarget,
    *,
    progress: bool = False,
) -> Path:
    name, version = target.package_name, target.package_version
    docs_dir = docs_directory(settings, name, version)
    archive_name = docs_archive_name(name, version)
    url = docs_archive_url(settings.repo_url, name, version)

    try:
        body = fetch_remote_file(http, url, progress=progress)
    except RemoteError as e:
        raise RemoteError(
            f"Unable to fetch documentation. Message returned is {e}",
            status_code=e.status_code,
            body=e.body,
        ) from e

    archive_path = write_archive(docs_dir / archive_name, body)
    files = extract_archive(archive_path, docs_dir)
    write_record(
        docs_dir,
        FetchRecord.for_body(
            name=name, version=version, url=url, archive=archive_name, body=body
        ),
    )

    print(f"Docs fetched: {name} {version} files={len(files)} dir={docs_dir}")
    title = index_title(docs_dir / "index.html")
    if title:
        print(f"Title: {title}")
    return docs_dir


def open_docs(settings: Settings, target: DocsTarget, browser: Browser) -> Path:
    docs_dir = docs_directory(
        settings, target.package_name, target.package_version
    )
    doc_index = docs_dir / "index.html"
    if not doc_index.is_file():
        raise NotFoundError(
            f"Documentation file not found: {doc_index}\n"
            f"TIP: fetch it first via: hex-docs --package {target.package_name} "
            f"--version {target.package_version} fetch"
        )

    record = read_record(docs_dir)
    if record is not None:
        print(f"Opening {doc_index} (fetched {record.fetched_at})")
    else:
        print(f"Opening {doc_index}")
    browser.open_in_browser(doc_index)
    return doc_index


def revert_docs(
    http: HttpClient, settings: Settings, *, name: str, version: str
) -> None:
    version = clean_version(version)
    auth = auth_headers(settings)

    result = release_docs_delete(
        http, settings, name=name, version=version, auth=auth
    )
    if result.ok:
        print(f"Reverted docs for {name} {version}")
        return

    print(f"Reverting docs for {name} {version} failed", file=sys.stderr)
    raise RemoteError(
        format_error_result(result.status_code, result.body),
        status_code=result.status_code,
        body=result.body,
    )


class DocsTask:
    def __init__(
        self,
        *,
        settings: Settings,
        http: HttpClient,
        project: Callable[[], ProjectConfig],
        browser: Browser,
    ) -> None:
        self.settings = settings
        self.http = http
        self.project = project
        self.browser = browser

    def run(self, options: DocsOptions) -> None:
        ensure_registry(self.settings)

        if options.revert is not None:
            # Reverts always target the current project, not --package.
            revert_docs(
                self.http,
                self.settings,
                name=self.project().name,
                version=options.revert,
            )
            return

        if options.args == ("open",):
            open_docs(
                self.settings, resolve_target(options, self.project), self.browser
            )
        elif options.args == ("fetch",):
            fetch_docs(
                self.http,
                self.settings,
                resolve_target(options, self.project),
                progress=options.progress,
            )
        else:
            raise UsageError(USAGE)
