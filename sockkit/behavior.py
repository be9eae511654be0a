"""Settings for TLS socket contexts and per-route WebSocket behaviour."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional

_MIN_IDLE_TIMEOUT = 8
_MAX_IDLE_TIMEOUT = 240 * 4
_MAX_LIFETIME_MINUTES = 240

Handler = Optional[Callable[..., Any]]


@dataclass(frozen=True)
class SocketContextOptions:
    """TLS options for a listening context; every field is optional."""

    key_file_name: Optional[str] = None
    cert_file_name: Optional[str] = None
    passphrase: Optional[str] = None
    dh_params_file_name: Optional[str] = None
    ca_file_name: Optional[str] = None
    ssl_ciphers: Optional[str] = None
    ssl_prefer_low_memory_usage: int = 0


@dataclass
class WebSocketBehavior:
    """Settings and event handlers for one WebSocket route.

    ``compression`` is a bit set of compression options; 0 disables it.
    ``idle_timeout`` is in seconds, ``max_lifetime`` in minutes (0 means
    no limit).
    """

    compression: int = 0
    max_payload_length: int = 16 * 1024
    idle_timeout: int = 120
    max_backpressure: int = 64 * 1024
    close_on_backpressure_limit: bool = False
    reset_idle_timeout_on_send: bool = False
    send_pings_automatically: bool = True
    max_lifetime: int = 0
    upgrade: Handler = None
    open: Handler = None
    message: Handler = None
    drain: Handler = None
    ping: Handler = None
    pong: Handler = None
    subscription: Handler = None
    close: Handler = None

    def validate(self) -> WebSocketBehavior:
        """Check the timeouts and return self.

        Raises ValueError if ``idle_timeout`` is neither 0 nor in 8..960,
        or if ``max_lifetime`` is outside 0..240.
        """
        if self.idle_timeout < 0:
            raise ValueError("idleTimeout must not be negative")
        if self.idle_timeout and self.idle_timeout < _MIN_IDLE_TIMEOUT:
            raise ValueError("idleTimeout must be either 0 or greater than 8!")
        if self.idle_timeout > _MAX_IDLE_TIMEOUT:
            raise ValueError("idleTimeout must not be greater than 960 seconds!")
        if self.max_lifetime < 0:
            raise ValueError("maxLifetime must not be negative")
        if self.max_lifetime > _MAX_LIFETIME_MINUTES:
            raise ValueError("maxLifetime must not be greater than 240 minutes!")
        return self