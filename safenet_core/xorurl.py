# safenet_core/xorurl.py

"""
Parsing of safe:// addressing URLs.

    scheme://[sub1.sub2....]toplevel[/path][?...&v=<uint>&...]

The host is split into sub names and a top level name, a bare "/" path is
normalised to "", and the first query segment starting with "v=" selects the
content version. A version that is not a valid u64 is ignored rather than
rejected.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple
from urllib.parse import urlsplit
import re

from . import config
from .constants import URL_VERSION_QUERY_NAME, U64_MAX
from .errors import InvalidXorUrl
from .logger import get_logger

log = get_logger("SAFE.XorUrl")

_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")
_U64_RE = re.compile(r"\+?[0-9]+")
_FORBIDDEN_HOST_CHARS = frozenset("\x00\t\n\r #/<>?@[\\]^|")
# leading and trailing C0 controls and spaces are not part of a URL
_C0_AND_SPACE = "".join(chr(c) for c in range(0x21))


@dataclass(frozen=True)
class ParsedUrl:
    top_level_name: str
    sub_names: Tuple[str, ...] = ()
    path: str = ""
    version: Optional[int] = None


def _host_str(netloc: str) -> str:
    hostinfo = netloc.rpartition("@")[2]
    if hostinfo.startswith("["):
        end = hostinfo.find("]")
        if end == -1:
            raise InvalidXorUrl(f"Problem parsing the safe:// URL: unterminated IPv6 host in '{netloc}'")
        return hostinfo[:end + 1]
    return hostinfo.partition(":")[0]


def parse_version(query: Optional[str]) -> Optional[int]:
    if not query:
        return None
    version_item = next(
        (q for q in query.split("&") if q.startswith(URL_VERSION_QUERY_NAME)), None
    )
    if version_item is None:
        return None
    version_str = version_item[len(URL_VERSION_QUERY_NAME):]
    if not _U64_RE.fullmatch(version_str):
        return None
    version = int(version_str)
    return version if version <= U64_MAX else None


def get_subnames_host_and_path(xorurl: str) -> ParsedUrl:
    try:
        xorurl = xorurl.strip(_C0_AND_SPACE)
        parsing_url = urlsplit(xorurl)
        parsing_url.port  # raises on a malformed port
    except ValueError as e:
        raise InvalidXorUrl(f"Problem parsing the safe:// URL {e!r}") from e

    if not parsing_url.scheme or not _SCHEME_RE.fullmatch(parsing_url.scheme):
        raise InvalidXorUrl(f"Problem parsing the safe:// URL: missing scheme in '{xorurl}'")

    host_str = _host_str(parsing_url.netloc)
    if not host_str:
        raise InvalidXorUrl(f"Problem parsing the safe:// URL: no host found in '{xorurl}'")
    bad = sorted(set(host_str) & _FORBIDDEN_HOST_CHARS)
    if bad and not host_str.startswith("["):
        raise InvalidXorUrl(
            f"Problem parsing the safe:// URL: invalid character(s) {bad!r} in host '{host_str}'"
        )

    if parsing_url.scheme != config.url_scheme():
        log.warning(f"URL scheme '{parsing_url.scheme}' is not '{config.url_scheme()}': {xorurl}")

    names_vec = host_str.split(".")
    top_level_name = names_vec[-1]
    sub_names = tuple(names_vec[:-1])

    path = parsing_url.path
    if path == "/":
        path = ""

    version = parse_version(parsing_url.query)

    log.debug(
        f"Data from url: sub names: {list(sub_names)}, host: {top_level_name}, "
        f"path: {path}, version: {version}"
    )
    return ParsedUrl(
        top_level_name=top_level_name,
        sub_names=sub_names,
        path=path,
        version=version,
    )


parse_xorurl = get_subnames_host_and_path
