# app/services/advertisement.py
"""
Helpers for the smart-HTTP ref advertisement returned by
`GET <repo>.git/info/refs?service=git-upload-pack`.

Only the subset needed to map ref names to shas is handled:

    001e# service=git-upload-pack
    0000015a<sha> HEAD\\0<capabilities> symref=HEAD:refs/heads/main ...
    003f<sha> refs/heads/main
    003e<sha> refs/tags/v1.0
    0000
"""
from __future__ import annotations

import re
from typing import Iterable, List, Optional

from app.errors import ErrorKind, ResolveError
from app.models import ResolutionResult

# https://git-scm.com/docs/protocol-common#_pkt_line_format
PKT_LEN_SIZE = 4
HEADER_LINES = 2

_SYMREF_HEAD_RE = re.compile(r"symref=HEAD:(\S+)")


def split_lines(body: str) -> List[str]:
    lines = body.split("\n")
    if len(lines) < HEADER_LINES + 1:
        raise ResolveError(ErrorKind.MALFORMED, f"corrupted response: {lines}")
    return lines


def default_ref(lines: List[str]) -> str:
    """Default branch announced by the HEAD symref on the 2nd header line."""
    m = _SYMREF_HEAD_RE.search(lines[1])
    if not m:
        raise ResolveError(ErrorKind.MALFORMED, f"default branch not advertised: {lines[1]!r}")
    return m.group(1)


def search_terms(ref: Optional[str]) -> List[str]:
    if not ref:
        return []
    if ref.startswith("refs/"):
        # full ref name (e.g. 'refs/tags/v0.1.2')
        return [ref]
    # short ref name, potentially ambiguous (e.g. 'main', 'v0.1.2')
    return [f"refs/heads/{ref}", f"refs/tags/{ref}"]


def match_ref(lines: Iterable[str], terms: Iterable[str]) -> Optional[ResolutionResult]:
    """First advertised line whose ref is one of `terms`, in advertisement order."""
    wanted = set(terms)
    for row in lines:
        parts = row.split(" ")
        if len(parts) != 2 or parts[1] not in wanted:
            continue
        return ResolutionResult(sha=parts[0][PKT_LEN_SIZE:], fq_ref=parts[1])
    return None


def resolve_from_advertisement(body: str, ref: Optional[str]) -> Optional[ResolutionResult]:
    lines = split_lines(body)
    terms = search_terms(ref)
    if not ref:
        terms.append(default_ref(lines))
    return match_ref(lines[HEADER_LINES:], terms)
