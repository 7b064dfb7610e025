"""Per-call request options.

A request option is a callable applied to the built ``httpx.Request`` just
before it is sent. Options run in the order given and may raise; a failing
option aborts the call before any network activity.
"""

from __future__ import annotations

from collections.abc import Callable

import httpx

RequestOption = Callable[[httpx.Request], None]


def with_header(name: str, value: str) -> RequestOption:
    def apply(request: httpx.Request) -> None:
        request.headers[name] = value

    return apply


def with_sudo(user: str | int) -> RequestOption:
    """Run the request as another user (administrator tokens only)."""
    if isinstance(user, bool) or not isinstance(user, (str, int)) or user == "":
        msg = f"sudo user must be a username or numeric ID, got {user!r}"
        raise ValueError(msg)
    return with_header("Sudo", str(user))


def with_timeout(seconds: float) -> RequestOption:
    """Override the client-wide timeout for a single request."""

    def apply(request: httpx.Request) -> None:
        if seconds <= 0:
            msg = f"timeout must be positive, got {seconds}"
            raise ValueError(msg)
        request.extensions["timeout"] = httpx.Timeout(seconds).as_dict()

    return apply
