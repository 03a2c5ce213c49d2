"""Process entry point: bind the listener and serve until terminated."""

from __future__ import annotations

import logging
import socket

import uvicorn

from .factory import create_app
from .logging_config import configure_logging
from .settings import Settings, get_settings

log = logging.getLogger(__name__)


class AnnouncingServer(uvicorn.Server):
    """uvicorn server that reports the port once the socket is bound."""

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        # A failed bind exits inside super().startup(), so only a live
        # listener gets announced.
        await super().startup(sockets=sockets)
        if self.started:
            log.info("Server running on port %s", self.bound_port())

    def bound_port(self) -> int:
        for server in self.servers:
            for sock in server.sockets:
                return sock.getsockname()[1]
        return self.config.port


def build_server(settings: Settings) -> AnnouncingServer:
    # Levels come from configure_logging, not from uvicorn.
    config = uvicorn.Config(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
        log_level=None,
    )
    return AnnouncingServer(config)


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    build_server(settings).run()
