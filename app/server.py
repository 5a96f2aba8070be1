"""
Start and stop a Blog API server in a background thread.

``run_server`` binds a fresh application to the given database and
serves it with werkzeug until ``close_server`` is called. Only one
server runs per process.
"""

import logging
import threading

from werkzeug.serving import BaseWSGIServer, make_server

from app import create_app

logger = logging.getLogger(__name__)

_server: BaseWSGIServer | None = None
_thread: threading.Thread | None = None


def run_server(
    database_url: str | None = None,
    host: str = "127.0.0.1",
    port: int = 0,
    config_name: str | None = None
) -> str:
    """
    Start serving the API.

    Args:
        database_url: SQLAlchemy URL of the database to serve; the
                      configured database is used when None.
        host: Interface to bind.
        port: Port to bind; 0 picks a free port.
        config_name: Configuration environment name.

    Returns:
        Base URL of the running server, e.g. ``http://127.0.0.1:5001``.

    Raises:
        RuntimeError: If a server is already running.
    """
    global _server, _thread

    if _server is not None:
        raise RuntimeError("Server is already running")

    app = create_app(config_name, database_url=database_url)
    server = make_server(host, port, app, threaded=True)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()

    _server, _thread = server, thread
    base_url = f"http://{host}:{server.server_port}"
    logger.info(f"Server listening on {base_url}")
    return base_url


def close_server() -> None:
    """Stop the server started by ``run_server``; no-op if none is running."""
    global _server, _thread

    if _server is None:
        return

    logger.info("Closing server")
    _server.shutdown()
    _server.server_close()
    if _thread is not None:
        _thread.join(timeout=5)
    _server, _thread = None, None
