"""Configuration for the evaluation service and CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class ServiceConfig:
    """Centralized configuration for the HTTP service and CLI.

    Attributes:
        host: Interface the HTTP server binds to (default: 0.0.0.0)
        port: Port the HTTP server binds to (default: 8000)
        debug: Enable uvicorn reload mode (default: false)
        max_digits: Longest accepted operand string, sign included
            (default: 10,000)
        max_shift: Largest accepted shift amount in either direction
            (default: 1,000,000 bits)
        max_request_size: Largest accepted request body in bytes (default: 1 MB)
    """

    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    # Operand limits
    max_digits: int = 10_000
    max_shift: int = 1_000_000

    max_request_size: int = 1024 * 1024

    @classmethod
    def from_env(cls) -> ServiceConfig:
        """Build a config from LIMBINT_* environment variables.

        - LIMBINT_HOST, LIMBINT_PORT, LIMBINT_DEBUG
        - LIMBINT_MAX_DIGITS, LIMBINT_MAX_SHIFT, LIMBINT_MAX_REQUEST_SIZE
        """
        defaults = cls()
        return cls(
            host=os.environ.get("LIMBINT_HOST", defaults.host),
            port=int(os.environ.get("LIMBINT_PORT", defaults.port)),
            debug=_env_flag("LIMBINT_DEBUG"),
            max_digits=int(os.environ.get("LIMBINT_MAX_DIGITS", defaults.max_digits)),
            max_shift=int(os.environ.get("LIMBINT_MAX_SHIFT", defaults.max_shift)),
            max_request_size=int(
                os.environ.get("LIMBINT_MAX_REQUEST_SIZE", defaults.max_request_size)
            ),
        )


# Default configuration instance, read once at import
DEFAULT_CONFIG = ServiceConfig.from_env()
