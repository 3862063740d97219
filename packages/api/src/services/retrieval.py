# This project was developed with assistance from AI tools.
"""Store failure translation for read paths.

Every query the resolver issues runs inside ``retrieval_guard`` so that a
transport or query failure reaches the caller as ``RetrievalError``, which
is distinct from an empty result. Nothing here retries.

``RetrievalError.message`` is shown to the applicant as-is; the failing
operation is only kept on the exception and in the log.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

APPLICATION_UNAVAILABLE = "Fehler beim Laden des Antragsstatus."
REQUESTS_UNAVAILABLE = "Fehler beim Laden der angeforderten Dokumente."


class RetrievalError(Exception):
    """Raised when the store is unreachable or returns a malformed response."""

    def __init__(self, message: str, *, operation: str | None = None):
        super().__init__(message)
        self.message = message
        self.operation = operation


@asynccontextmanager
async def retrieval_guard(operation: str, message: str) -> AsyncIterator[None]:
    """Convert store-layer exceptions raised inside the block to RetrievalError."""
    try:
        yield
    except RetrievalError:
        raise
    except (SQLAlchemyError, OSError) as exc:
        logger.error("Store query failed during %s: %s", operation, exc)
        raise RetrievalError(message, operation=operation) from exc
