"""Translation of driver failures into domain storage errors."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy.exc import SQLAlchemyError

from connector.domain.error import StorageError


@asynccontextmanager
async def storage_operation(operation: str) -> AsyncIterator[None]:
    """Run a repository operation, surfacing driver errors as ``StorageError``.

    The driver message is logged and kept as ``__cause__``; it never reaches
    the error message shown to callers.

    Args:
        operation: Operation name for logs ("post_repository.save")
    """
    with logfire.span(operation):
        try:
            yield
        except SQLAlchemyError as e:
            logfire.error(
                "Storage operation failed",
                operation=operation,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise StorageError(operation) from e
