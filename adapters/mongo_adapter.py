"""MongoDB adapter: a single cached client shared by the app and scripts.
"""

from typing import Optional, Dict, Any
import logging
import re
import threading
import time
from concurrent.futures import Future

import anyio
from pymongo import MongoClient
from pymongo.database import Database

from app.config import settings
from domain.enums import ConnectionState

logger = logging.getLogger("chefenplace.mongo")

_client: Optional[MongoClient] = None
_db: Optional[Database] = None
_state = ConnectionState.DISCONNECTED
_connect_lock = threading.Lock()
_pending: Optional[Future] = None

_CREDENTIALS_RE = re.compile(r"//[^:/@]+:[^@]+@")


def mask_uri(uri: str) -> str:
    """Hide user and password in a connection string."""
    return _CREDENTIALS_RE.sub("//***:***@", uri)


def _open_client(uri: str) -> MongoClient:
    return MongoClient(
        uri,
        maxPoolSize=settings.db_max_pool_size,
        minPoolSize=settings.db_min_pool_size,
        serverSelectionTimeoutMS=settings.db_server_selection_timeout_ms,
        socketTimeoutMS=settings.db_server_selection_timeout_ms,
        connectTimeoutMS=settings.db_server_selection_timeout_ms,
        retryWrites=True,
        retryReads=True,
        w="majority",
    )


# ------------------ Connection ------------------
def connect_with_retry(uri: Optional[str] = None, db_name: Optional[str] = None) -> Database:
    """Connect and ping, retrying with exponential backoff.

    Args:
        uri: connection string, defaults to ``settings.mongodb_uri``
        db_name: database name when the URI does not carry one

    Returns:
        The connected database handle

    Raises:
        The last driver error once every attempt has failed.
    """
    global _client, _db, _state
    uri = uri or settings.mongodb_uri
    attempts = settings.db_connect_attempts

    for attempt in range(1, attempts + 1):
        _state = ConnectionState.CONNECTING
        client = None
        try:
            logger.info(
                "Connecting to MongoDB %s (attempt %d/%d)", mask_uri(uri), attempt, attempts
            )
            client = _open_client(uri)
            client.admin.command("ping")
            default_db = client.get_default_database(default=db_name or settings.mongodb_db)
            _client, _db = client, default_db
            _state = ConnectionState.CONNECTED
            logger.info("MongoDB connected (database: %s)", default_db.name)
            return default_db
        except Exception as exc:
            _state = ConnectionState.DISCONNECTED
            if client is not None:
                client.close()
            logger.warning("MongoDB connection attempt %d failed: %s", attempt, exc)
            if attempt == attempts:
                logger.error("Failed to connect to MongoDB after %d attempts", attempts)
                raise
            delay = settings.db_connect_retry_delay_sec * 2 ** (attempt - 1)
            logger.info("Waiting %.1fs before retry", delay)
            time.sleep(delay)


def get_connection() -> Database:
    """Return the cached database, connecting once if needed.

    Concurrent callers share the in-flight attempt and all receive its
    result or its error. The next call after a failure starts a new attempt.
    """
    global _pending
    if _db is not None:
        return _db
    with _connect_lock:
        if _db is not None:
            return _db
        pending = _pending
        if pending is None:
            pending = _pending = Future()
            owner = True
        else:
            owner = False

    if not owner:
        return pending.result()

    try:
        db = connect_with_retry()
    except BaseException as exc:
        pending.set_exception(exc)
        raise
    else:
        pending.set_result(db)
        return db
    finally:
        with _connect_lock:
            if _pending is pending:
                _pending = None


async def ensure_connection() -> Database:
    """Ensure the database connection is ready.

    The blocking connect runs in a worker thread; a caller-side deadline
    abandons the wait without stopping the attempt itself.
    """
    if _db is not None:
        return _db
    return await anyio.to_thread.run_sync(get_connection, abandon_on_cancel=True)


def initialize_database() -> Optional[Database]:
    """Startup hook. Production keeps serving without a database."""
    try:
        return get_connection()
    except Exception as exc:
        logger.error("Database initialization error: %s", exc)
        if settings.is_production():
            logger.warning("Continuing without database connection")
            return None
        raise


def _known_host() -> Optional[str]:
    # Client.address blocks on server selection; the topology snapshot does not.
    if _client is None:
        return None
    for host, _port in _client.topology_description.server_descriptions():
        return host
    return None


def get_connection_status() -> Dict[str, Any]:
    return {
        "state": _state.value,
        "readyState": _state.ready_state,
        "isConnected": _state is ConnectionState.CONNECTED,
        "host": _known_host(),
        "name": _db.name if _db is not None else None,
    }


def get_db() -> Database:
    """Synchronous accessor for scripts and repositories."""
    return get_connection()


def close():
    """Close MongoDB connection."""
    global _client, _db, _state
    try:
        if _client is not None:
            _state = ConnectionState.DISCONNECTING
            _client.close()
            logger.info("MongoDB client closed")
    except Exception:
        logger.exception("Error closing MongoDB client")
    finally:
        _client = None
        _db = None
        _state = ConnectionState.DISCONNECTED
