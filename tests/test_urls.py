from hex_docs.urls import (
    docs_archive_name,
    docs_archive_url,
    normalize_url,
    release_docs_url,
)


def test_docs_archive_url_is_byte_exact():
    assert (
        docs_archive_url("https://repo.hex.pm", "foo", "1.2.3")
        == "https://repo.hex.pm/docs/foo-1.2.3.tar.gz"
    )


def test_docs_archive_url_tolerates_trailing_slash():
    assert (
        docs_archive_url("https://repo.hex.pm/", "foo", "1.2.3")
        == "https://repo.hex.pm/docs/foo-1.2.3.tar.gz"
    )


def test_docs_archive_name():
    assert docs_archive_name("plug", "1.0.0-rc.1") == "plug-1.0.0-rc.1.tar.gz"


def test_release_docs_url():
    assert (
        release_docs_url("https://hex.pm/api", "my_app", "0.4.0")
        == "https://hex.pm/api/packages/my_app/releases/0.4.0/docs"
    )


def test_normalize_url_lowercases_host_and_drops_fragment():
    assert (
        normalize_url("HTTPS://Repo.HEX.pm/docs/Foo-1.0.0.tar.gz#x")
        == "https://repo.hex.pm/docs/Foo-1.0.0.tar.gz"
    )
