"""FastAPI event bridge server.

This module creates the FastAPI application and runs it under uvicorn on a
background daemon thread for the lifetime of the host process. Route
handlers live in ``bridge/routes.py``.

The listening socket is bound on the caller's thread before the server
thread starts, so "port already in use" surfaces as a ``BridgeStartupError``
from ``start()`` instead of dying quietly inside the thread.
"""

import logging
import socket
import threading
import time
from logging.handlers import RotatingFileHandler
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from claude_commander.bridge import routes
from claude_commander.bridge.events import Publisher
from claude_commander.config.messages import BRIDGE_MESSAGES
from claude_commander.config.settings import bridge_settings
from claude_commander.constants import (
    BRIDGE_HOST,
    BRIDGE_SHUTDOWN_TIMEOUT_SECONDS,
    BRIDGE_STARTUP_POLL_INTERVAL,
    EVENTS_LOGGER_NAME,
    LOG_BACKUP_COUNT,
    LOG_MAX_BYTES,
    PACKAGE_LOGGER_NAME,
    VERSION,
)
from claude_commander.exceptions import BridgeStartupError
from claude_commander.utils.platform import IS_WINDOWS

logger = logging.getLogger(__name__)

SERVER_THREAD_NAME = "claude-commander-bridge"

# File handler shared with uvicorn.error by the last configure_logging() call
_uvicorn_file_handler: logging.Handler | None = None


def configure_logging(log_level: str, log_file: Path | None = None) -> None:
    """Configure logging for the bridge.

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR).
        log_file: Optional log file path; a stream handler is used when unset.
    """
    global _uvicorn_file_handler

    level = getattr(logging, log_level.upper(), logging.INFO)

    app_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    app_logger.setLevel(level)
    # Host applications may configure the root logger; keep our output in one place
    app_logger.propagate = False
    for old_handler in list(app_logger.handlers):
        app_logger.removeHandler(old_handler)
        old_handler.close()
    if _uvicorn_file_handler is not None:
        logging.getLogger("uvicorn.error").removeHandler(_uvicorn_file_handler)
        _uvicorn_file_handler.close()
        _uvicorn_file_handler = None

    # Events are always recorded, whatever the package level
    logging.getLogger(EVENTS_LOGGER_NAME).setLevel(logging.INFO)

    # Suppress uvicorn's loggers - we handle our own logging
    logging.getLogger("uvicorn").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    if level == logging.DEBUG:
        logging.getLogger("uvicorn.error").setLevel(logging.INFO)

    if level == logging.DEBUG:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d - %(message)s",
            datefmt="%H:%M:%S",
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s",
            datefmt="%H:%M:%S",
        )

    handler: logging.Handler = logging.StreamHandler()
    file_error: OSError | None = None
    if log_file:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handler = RotatingFileHandler(
                log_file,
                mode="a",
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
            # Capture uvicorn tracebacks in the same file
            logging.getLogger("uvicorn.error").addHandler(handler)
            _uvicorn_file_handler = handler
        except OSError as e:
            file_error = e

    handler.setFormatter(formatter)
    app_logger.addHandler(handler)
    if file_error:
        app_logger.warning(f"Could not set up file logging to {log_file}: {file_error}")


def create_app(publisher: Publisher) -> FastAPI:
    """Create the FastAPI application.

    Args:
        publisher: Receives one ``BridgeEvent`` per qualifying hook request.

    Returns:
        Configured FastAPI application.
    """
    # No docs/openapi routes: every path belongs to the hook catch-all
    app = FastAPI(
        title="claude-commander bridge",
        version=VERSION,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.publisher = publisher
    app.include_router(routes.router)
    app.add_exception_handler(StarletteHTTPException, routes.http_error_as_ok)
    return app


class BridgeServer:
    """Loopback HTTP listener that republishes Claude Code hooks.

    Example usage:
        server = BridgeServer(CallbackPublisher(window.emit))
        server.start()  # returns once listening; raises if the port is taken
    """

    def __init__(
        self,
        publisher: Publisher,
        port: int | None = None,
        host: str = BRIDGE_HOST,
        startup_timeout: float | None = None,
    ):
        """Initialize bridge server.

        Args:
            publisher: Event sink shared by all request workers.
            port: Port to bind (0 picks a free port). Defaults to settings.
            host: Interface to bind; loopback by default.
            startup_timeout: Seconds to wait for the listener to come up.
        """
        self.publisher = publisher
        self.host = host
        self.port = port if port is not None else bridge_settings.port
        self.startup_timeout = (
            startup_timeout
            if startup_timeout is not None
            else bridge_settings.startup_timeout_seconds
        )
        self._server: uvicorn.Server | None = None
        self._thread: threading.Thread | None = None
        self._socket: socket.socket | None = None

    @property
    def is_running(self) -> bool:
        return (
            self._server is not None
            and self._server.started
            and self._thread is not None
            and self._thread.is_alive()
        )

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def _bind(self) -> socket.socket:
        """Bind the listening socket on the calling thread."""
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        if not IS_WINDOWS:
            # Allow quick restarts while old connections sit in TIME_WAIT
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((self.host, self.port))
        except OSError as e:
            sock.close()
            raise BridgeStartupError(BRIDGE_MESSAGES["bind_failed"], port=self.port, cause=e) from e
        return sock

    def start(self) -> None:
        """Bind, start the server thread, and wait until it accepts requests.

        Raises:
            BridgeStartupError: If the port cannot be bound or the server does
                not come up within the startup timeout.
        """
        if self._thread is not None:
            logger.debug("Bridge server already started")
            return

        sock = self._bind()
        self._socket = sock
        self.port = sock.getsockname()[1]

        config = uvicorn.Config(
            create_app(self.publisher),
            log_config=None,
            access_log=False,
            lifespan="off",
        )
        self._server = uvicorn.Server(config)
        self._thread = threading.Thread(
            target=self._server.run,
            kwargs={"sockets": [sock]},
            name=SERVER_THREAD_NAME,
            daemon=True,
        )
        self._thread.start()

        deadline = time.monotonic() + self.startup_timeout
        while not self._server.started:
            if not self._thread.is_alive():
                self._reset()
                raise BridgeStartupError(BRIDGE_MESSAGES["bind_failed"], port=self.port)
            if time.monotonic() >= deadline:
                self.stop()
                raise BridgeStartupError(
                    BRIDGE_MESSAGES["startup_timeout"].format(timeout=self.startup_timeout),
                    port=self.port,
                )
            time.sleep(BRIDGE_STARTUP_POLL_INTERVAL)

        logger.info(BRIDGE_MESSAGES["listening"].format(port=self.port))

    def wait(self) -> None:
        """Block until the server thread exits (foreground use)."""
        while self._thread is not None and self._thread.is_alive():
            self._thread.join(0.5)

    def stop(self, timeout: float = BRIDGE_SHUTDOWN_TIMEOUT_SECONDS) -> None:
        """Ask uvicorn to exit and join the server thread.

        Hosts normally never call this; the daemon thread ends with the
        process. It exists for tests and the foreground ``serve`` command.
        """
        if self._server is not None:
            self._server.should_exit = True
        if self._thread is not None:
            self._thread.join(timeout)
            if self._thread.is_alive():
                logger.warning(f"Bridge server thread did not exit within {timeout}s")
        self._reset()
        logger.info(BRIDGE_MESSAGES["stopped"])

    def _reset(self) -> None:
        if self._socket is not None:
            self._socket.close()
        self._socket = None
        self._server = None
        self._thread = None
