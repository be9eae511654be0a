"""Workarounds for clients with known protocol defects."""

from __future__ import annotations

_VERSION_MARKER = " Version/15."
_SAFARI_MARKER = " Safari/"
_DIGITS = frozenset("0123456789")
_LAST_BROKEN_MINOR = 3


def has_broken_compression(user_agent: str | bytes) -> bool:
    """True for Safari 15.0 - 15.3, whose permessage-deflate is broken.

    Only the first " Version/15." in the user agent is considered. The
    minor version must be plain decimal digits followed by a space, and a
    " Safari/" token must follow it.
    """
    if isinstance(user_agent, (bytes, bytearray, memoryview)):
        user_agent = bytes(user_agent).decode("latin-1")

    start = user_agent.find(_VERSION_MARKER)
    if start == -1:
        return False
    start += len(_VERSION_MARKER)

    end = user_agent.find(" ", start)
    if end == -1:
        return False

    minor = user_agent[start:end]
    if not minor or not set(minor) <= _DIGITS:
        return False
    if int(minor) > _LAST_BROKEN_MINOR:
        return False

    return user_agent.find(_SAFARI_MARKER, end) != -1