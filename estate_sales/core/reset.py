# =========================================================
# DATABASE RESET
#
# One reset at a time per process. A second request while one is
# running is refused immediately (no queueing). A reset that outlives
# its time bound is reported as a timeout and the lock is released;
# the abandoned work may still finish or fail in the background, so
# every reset starts by dropping whatever schema it finds.
# =========================================================

import logging
import threading
import time

from sqlalchemy.engine import Engine

from estate_sales.core.errors import (
    OperationTimeoutError,
    ResetFailedError,
    ResetInProgressError,
)
from estate_sales.core.seed import rebuild_schema

logger = logging.getLogger(__name__)

_reset_lock = threading.Lock()


def reset_in_progress() -> bool:
    return _reset_lock.locked()


def _run_reset(engine: Engine, outcome: dict) -> None:
    try:
        with engine.begin() as connection:
            rebuild_schema(connection)
    except Exception as exc:
        logger.exception("Database reset failed")
        outcome["error"] = exc


def reset_database(engine: Engine, timeout: float) -> float:
    """Rebuild and reseed the database; return the elapsed time in seconds."""
    if not _reset_lock.acquire(blocking=False):
        raise ResetInProgressError("Database reset already in progress. Please wait.")

    logger.info("Attempting to reset database...")
    started = time.monotonic()

    try:
        outcome = {}
        worker = threading.Thread(
            target=_run_reset,
            args=(engine, outcome),
            name="database-reset",
            daemon=True,
        )
        worker.start()
        worker.join(timeout)

        if worker.is_alive():
            elapsed = time.monotonic() - started
            logger.warning(
                f"Reset timeout: operation took {elapsed * 1000:.0f}ms - "
                "this may indicate database load or lock contention"
            )
            raise OperationTimeoutError(
                "Database reset timed out. The database may be under heavy load. Please try again.",
                error=f"Reset operation timeout after {timeout:g} seconds",
            )

        if "error" in outcome:
            elapsed = time.monotonic() - started
            raise ResetFailedError(
                "Database reset failed. Please try again.",
                error=f"{outcome['error']} (after {elapsed * 1000:.0f}ms)",
            ) from outcome["error"]

    finally:
        _reset_lock.release()

    elapsed = time.monotonic() - started
    logger.info(f"Database reset completed successfully ({elapsed * 1000:.0f}ms)")
    return elapsed
