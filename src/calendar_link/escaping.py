from __future__ import annotations

from typing import Mapping
from urllib.parse import quote, urlencode

ICS_LINE_LIMIT = 75

# kept literal in query values: dates (20190224T100000Z/...) and Outlook's path
QUERY_SAFE = "/:"


def encode_query(params: Mapping[str, str]) -> str:
    """Percent-encode a query string; spaces become %20, not '+'."""
    return urlencode(params, safe=QUERY_SAFE, quote_via=quote)


def ics_escape(text: str) -> str:
    return (
        (text or "")
        .replace("\\", "\\\\")
        .replace("\r\n", "\n")
        .replace("\r", "\n")
        .replace("\n", "\\n")
        .replace(",", "\\,")
        .replace(";", "\\;")
    )


def fold_line(line: str, limit: int = ICS_LINE_LIMIT) -> str:
    """
    RFC 5545 line folding.

    Content lines are cut at octet boundaries of their UTF-8 form (never in
    the middle of a character) and continued with CRLF plus one space. The
    leading space counts against the limit of the continuation line.
    """
    if len(line.encode("utf-8")) <= limit:
        return line

    parts: list[str] = []
    chunk: list[str] = []
    size = 0
    budget = limit
    for ch in line:
        n = len(ch.encode("utf-8"))
        if size + n > budget:
            parts.append("".join(chunk))
            chunk, size = [], 0
            budget = limit - 1
        chunk.append(ch)
        size += n
    parts.append("".join(chunk))
    return "\r\n ".join(parts)
