from __future__ import annotations

from typing import List, Optional
from urllib.parse import parse_qsl, quote, unquote_plus, urlsplit, urlunsplit


def _segments(query: str) -> List[str]:
    return [seg for seg in query.split("&") if seg]


def _segment_key(segment: str) -> str:
    return unquote_plus(segment.split("=", 1)[0])


def add_query_arg(url: str, key: str, value: object) -> str:
    """
    Set ``key`` exactly once in the query of ``url``.

    Existing occurrences are dropped and the new pair goes last. The other
    segments are kept byte-for-byte, so their encoding is not touched.
    """
    parts = urlsplit(url)
    kept = [seg for seg in _segments(parts.query) if _segment_key(seg) != key]
    kept.append(f"{quote(key, safe='')}={quote(str(value), safe='')}")
    return urlunsplit(parts._replace(query="&".join(kept)))


def get_query_arg(url: str, key: str) -> Optional[str]:
    values = [v for k, v in parse_qsl(urlsplit(url).query, keep_blank_values=True) if k == key]
    return values[-1] if values else None
