"""Current-project lookup.

The project is described by ``pyproject.toml``::

    [project]
    name = "my_app"
    version = "1.0.0"

    [tool.hex.package]
    name = "my_package"   # optional, defaults to the project name
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

from .errors import ProjectError

PROJECT_FILE = "pyproject.toml"


@dataclass(frozen=True)
class ProjectConfig:
    app: str
    version: str
    package_name: str | None = None

    @property
    def name(self) -> str:
        return self.package_name or self.app


def load_project(project_dir: Path) -> ProjectConfig:
    path = project_dir / PROJECT_FILE
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise ProjectError(
            f"No project found: missing {PROJECT_FILE} in {project_dir}"
        ) from None
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        raise ProjectError(f"Failed to read {path}: {e}") from e

    project = data.get("project") or {}
    app = str(project.get("name") or "").strip()
    version = str(project.get("version") or "").strip()
    if not app:
        raise ProjectError(f"{path}: [project] name is required")
    if not version:
        raise ProjectError(f"{path}: [project] version is required")

    package = ((data.get("tool") or {}).get("hex") or {}).get("package") or {}
    package_name = str(package.get("name") or "").strip() or None

    return ProjectConfig(app=app, version=version, package_name=package_name)
