"""Process entrypoint that binds the HTTP listener and serves the API."""

import logging
import socket
import sys

import uvicorn

from app.core.config import settings
from app.core.logging import configure_logging
from app.main import create_application

logger = logging.getLogger(__name__)


class AssessmentServer(uvicorn.Server):
    """uvicorn server that announces its port once the listener is bound."""

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        # uvicorn exits or sets should_exit when lifespan or bind fails
        if self.started:
            logger.info("Server is running on port %s", self.config.port)


def port_available(host: str, port: int) -> bool:
    """Check whether a TCP port can be bound on the given interface."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            s.bind((host, port))
            return True
        except OSError:
            return False


def build_server(host: str, port: int) -> AssessmentServer:
    """Wrap a fresh application in a server bound to `host:port`."""
    config = uvicorn.Config(create_application(), host=host, port=port, log_config=None)
    return AssessmentServer(config)


def run(host: str | None = None, port: int | None = None) -> None:
    """Serve the application until the process is terminated.

    Exits with status 1, naming the port, when the port is already taken.
    """

    configure_logging()

    host = host or settings.HOST
    port = settings.PORT if port is None else port

    if not port_available(host, port):
        message = f"Port {port} is already in use; cannot start server."
        logger.error(message)
        sys.exit(message)

    build_server(host, port).run()


if __name__ == "__main__":
    run()
