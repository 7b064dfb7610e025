"""Project reference parsing."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from .exceptions import GitLabInvalidArgumentError

ProjectRef = int | str


def parse_id(ref: Any) -> str:
    """Normalize a project reference to its string form.

    Accepts a positive integer ID or a non-empty ``namespace/project`` path.
    Anything else raises :class:`GitLabInvalidArgumentError`.
    """
    # bool is an int subclass but never a valid ID
    if isinstance(ref, bool):
        msg = f"invalid ID type {ref!r}, the ID must be an int or a string"
        raise GitLabInvalidArgumentError(msg)
    if isinstance(ref, int):
        if ref <= 0:
            msg = f"invalid ID {ref}, numeric IDs must be positive"
            raise GitLabInvalidArgumentError(msg)
        return str(ref)
    if isinstance(ref, str):
        if not ref.strip():
            msg = "invalid ID, the project path must not be empty"
            raise GitLabInvalidArgumentError(msg)
        return ref
    msg = f"invalid ID type {type(ref).__name__}, the ID must be an int or a string"
    raise GitLabInvalidArgumentError(msg)


def encode_id(ref: Any) -> str:
    """Parse *ref* and percent-encode it as a single path segment."""
    return quote(parse_id(ref), safe="")


def encode_tag(tag_name: str) -> str:
    """Escape only the characters that would end the path segment early.

    ``#`` and ``?`` become ``%23`` and ``%3F``; ``+``, ``/`` and existing
    ``%`` escapes are left as given.
    """
    return quote(tag_name, safe="/!$&'()*+,;=:@~%")
