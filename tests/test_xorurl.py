import logging
import pytest
from safenet_core.errors import InvalidXorUrl
from safenet_core.xorurl import ParsedUrl, get_subnames_host_and_path, parse_version


def test_full_url():
    parsed = get_subnames_host_and_path("safe://sub1.sub2.mytop/some/path?v=42&x=1")
    assert parsed == ParsedUrl(
        top_level_name="mytop",
        sub_names=("sub1", "sub2"),
        path="/some/path",
        version=42,
    )


def test_root_path_is_empty():
    parsed = get_subnames_host_and_path("safe://mytop/")
    assert parsed.path == ""
    assert parsed.sub_names == ()
    assert parsed.top_level_name == "mytop"


def test_other_paths_unchanged():
    assert get_subnames_host_and_path("safe://mytop/a/b/").path == "/a/b/"


@pytest.mark.parametrize("url", [
    "safe://mytop?x=1",
    "safe://mytop?v=notanumber",
    "safe://mytop?vv=3",
    "safe://mytop?v=-1",
    "safe://mytop?v=18446744073709551616",
    "safe://mytop",
])
def test_no_version(url):
    assert get_subnames_host_and_path(url).version is None


def test_version_bounds_and_first_match():
    assert parse_version("v=18446744073709551615") == 2 ** 64 - 1
    assert parse_version("x=1&v=7&v=8") == 7
    assert parse_version("v=0") == 0
    assert parse_version("") is None


@pytest.mark.parametrize("url", [
    "mytop",
    "safe:///some/path",
    "safe://",
    "safe:mytop",
    "safe://mytop:notaport/",
    "safe://[::1",
    "safe://my top/",
])
def test_malformed_urls_rejected(url):
    with pytest.raises(InvalidXorUrl):
        get_subnames_host_and_path(url)


def test_host_case_and_userinfo():
    parsed = get_subnames_host_and_path("safe://user@Sub.MyTop:8080/x")
    assert parsed.sub_names == ("Sub",)
    assert parsed.top_level_name == "MyTop"
    assert parsed.path == "/x"


def test_parsed_components_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="SAFE.XorUrl")
    get_subnames_host_and_path("safe://a.b/c?v=3")
    assert "sub names: ['a']" in caplog.text
    assert "version: 3" in caplog.text


def test_foreign_scheme_warns(monkeypatch, caplog):
    monkeypatch.delenv("SAFE_URL_SCHEME", raising=False)
    parsed = get_subnames_host_and_path("http://example.com/")
    assert parsed.top_level_name == "com"
    assert "is not 'safe'" in caplog.text


@pytest.mark.parametrize("url", ["safe://mytop ", "  safe://mytop/\n", "\x00safe://mytop\t"])
def test_surrounding_whitespace_and_controls_trimmed(url):
    parsed = get_subnames_host_and_path(url)
    assert parsed.top_level_name == "mytop"
    assert parsed.path == ""


def test_parsed_url_is_immutable():
    parsed = get_subnames_host_and_path("safe://a.b.c/")
    assert isinstance(parsed.sub_names, tuple)
    assert hash(parsed) == hash(get_subnames_host_and_path("safe://a.b.c/"))
