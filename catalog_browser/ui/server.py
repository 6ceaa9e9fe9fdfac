from __future__ import annotations

import logging
import os
import socket
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

CONFIG_ROOT_ENV = "CATALOG_BROWSER_CONFIG_ROOT"
DEFAULT_PORT = 8051
PORT_ATTEMPTS = 100


def _port_is_free(host: str, port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        try:
            s.bind((host, port))
        except OSError:
            return False
    return True


def find_free_port(start_port: int, host: str = "0.0.0.0", attempts: int = PORT_ATTEMPTS) -> int:
    """
    First port in [start_port, start_port + attempts) that can be bound on host.

    :raises OSError: if every port in the range is taken
    """
    for port in range(start_port, start_port + attempts):
        if _port_is_free(host, port):
            return port
    raise OSError(f"No free port in {start_port}-{start_port + attempts - 1} on {host}")


@dataclass(frozen=True)
class ServerSettings:
    """How app.py serves the Dash app. Read from the environment."""
    config_root: str = "config"
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerSettings":
        env = os.environ if environ is None else environ
        raw_port = env.get("PORT", str(DEFAULT_PORT))
        try:
            port = int(raw_port)
        except ValueError:
            logger.warning("Ignoring invalid PORT", extra={"port": raw_port})
            port = DEFAULT_PORT
        return cls(
            config_root=env.get(CONFIG_ROOT_ENV, "config"),
            port=port,
            debug=env.get("DEBUG", "0") == "1",
        )

    def resolve_port(self) -> int:
        port = find_free_port(self.port, host=self.host)
        if port != self.port:
            logger.warning(
                "Preferred port taken, using the next free one",
                extra={"preferred_port": self.port, "port": port},
            )
        return port
