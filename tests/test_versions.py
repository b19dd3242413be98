import pytest

from hex_docs.errors import VersionError
from hex_docs.versions import clean_version


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1.2.3", "1.2.3"),
        ("v1.2.3", "1.2.3"),
        (" 0.4.0 ", "0.4.0"),
        ("1.0.0-rc.1", "1.0.0-rc.1"),
        ("2.0.0+build.5", "2.0.0+build.5"),
    ],
)
def test_clean_version_accepts_semver(raw, expected):
    assert clean_version(raw) == expected


@pytest.mark.parametrize("raw", ["1.2", "", "latest", "01.2.3", "1.2.3.4"])
def test_clean_version_rejects_malformed(raw):
    with pytest.raises(VersionError, match="Invalid version"):
        clean_version(raw)
