"""Shared advertisement builders for the test suite."""

from typing import Iterable, Optional, Tuple

SHA_MAIN = "5edf2b1cf4a0f4b7a3c7ab3d19b6cbb4b8f7e3a1"
SHA_DEVELOP = "0f3c8a7d2e91b6a4c5d8e7f6a9b0c1d2e3f4a5b6"
SHA_TAG_V1 = "9a1b2c3d4e5f60718293a4b5c6d7e8f901234567"
SHA_TAG_V1_PEELED = "1234567890abcdef1234567890abcdef12345678"
SHA_TAG_MAIN = "ffffeeeeddddccccbbbbaaaa9999888877776666"

CAPABILITIES = (
    "multi_ack thin-pack side-band side-band-64k ofs-delta shallow deepen-since "
    "deepen-not deepen-relative no-progress include-tag multi_ack_detailed "
    "allow-tip-sha1-in-want allow-reachable-sha1-in-want no-done"
)

DEFAULT_REFS = [
    (SHA_DEVELOP, "refs/heads/develop"),
    (SHA_MAIN, "refs/heads/main"),
    (SHA_TAG_V1, "refs/tags/v1.0.0"),
    (SHA_TAG_V1_PEELED, "refs/tags/v1.0.0^{}"),
]


def pkt(payload: str) -> str:
    return f"{len(payload) + 4:04x}{payload}"


def advertisement(
    refs: Iterable[Tuple[str, str]] = DEFAULT_REFS,
    head: Optional[str] = "refs/heads/main",
) -> str:
    refs = list(refs)
    caps = CAPABILITIES
    if head:
        caps += f" symref=HEAD:{head}"
    caps += " object-format=sha1 agent=git/github-g2faa2bf3a8d7"
    body = pkt("# service=git-upload-pack\n") + "0000"
    body += pkt(f"{refs[0][0]} HEAD\0{caps}\n")
    for sha, name in refs:
        body += pkt(f"{sha} {name}\n")
    return body + "0000"
