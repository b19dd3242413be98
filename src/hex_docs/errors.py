from __future__ import annotations


class DocsError(Exception):
    """Base for every failure reported to the user."""


class UsageError(DocsError):
    pass


class NotFoundError(DocsError):
    pass


class RemoteError(DocsError):
    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: bytes | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class FilesystemError(DocsError):
    pass


class ArchiveError(DocsError):
    pass


class VersionError(DocsError):
    pass


class AuthError(DocsError):
    pass


class ConfigError(DocsError):
    pass


class ProjectError(DocsError):
    pass


class RegistryError(DocsError):
    pass
