import pytest

from hex_docs.errors import ProjectError
from hex_docs.project import load_project


def test_load_project_defaults_package_name_to_app(project_dir):
    project = load_project(project_dir)

    assert project.app == "my_app"
    assert project.version == "0.4.0"
    assert project.name == "my_app"


def test_load_project_honors_package_name(tmp_path):
    (tmp_path / "pyproject.toml").write_text(
        "[project]\n"
        'name = "my_app"\n'
        'version = "1.0.0"\n'
        "\n"
        "[tool.hex.package]\n"
        'name = "my_package"\n',
        encoding="utf-8",
    )

    project = load_project(tmp_path)

    assert project.app == "my_app"
    assert project.name == "my_package"


def test_load_project_missing_file(tmp_path):
    with pytest.raises(ProjectError, match="missing pyproject.toml"):
        load_project(tmp_path)


def test_load_project_requires_version(tmp_path):
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "my_app"\n', encoding="utf-8"
    )
    with pytest.raises(ProjectError, match="version is required"):
        load_project(tmp_path)


def test_load_project_invalid_toml(tmp_path):
    (tmp_path / "pyproject.toml").write_text("[project\n", encoding="utf-8")
    with pytest.raises(ProjectError, match="Failed to read"):
        load_project(tmp_path)
