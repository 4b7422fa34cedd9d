"""BaseService: abstract foundation for all archlab services.

Every service receives a :class:`Workspace` at construction time. Expected
failures (unknown project, malformed snapshot) come back as a failed
:class:`ServiceResult`; they are never raised to the caller.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from archlab.domain.errors import (
    ArchlabError,
    DuplicateNodeError,
    GraphImportError,
    NodeNotFoundError,
    ProjectNotFoundError,
)
from archlab.services.result import ServiceResult

if TYPE_CHECKING:
    from archlab.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)

# Exception type -> ServiceError code. First match wins.
ERROR_CODES: tuple[tuple[type[Exception], str], ...] = (
    (GraphImportError, "INVALID_GRAPH"),
    (ProjectNotFoundError, "NOT_FOUND"),
    (NodeNotFoundError, "NOT_FOUND"),
    (DuplicateNodeError, "DUPLICATE_ID"),
    (ArchlabError, "ERROR"),
    (ValueError, "INVALID_ARGUMENT"),
    (OSError, "IO_ERROR"),
)


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class CheckService(BaseService):
            def check_source(self, source: str) -> ServiceResult:
                try:
                    graph = self._workspace.read_graph(source)
                except (ArchlabError, ValueError) as exc:
                    return self._failure("check", exc)
                ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    @staticmethod
    def _failure(op: str, exc: Exception, **detail: object) -> ServiceResult:
        """Convert an expected exception into a failed ServiceResult."""
        code = next(
            (code for exc_type, code in ERROR_CODES if isinstance(exc, exc_type)),
            "ERROR",
        )
        logger.debug("%s failed with %s: %s", op, code, exc)
        return ServiceResult.failure(op, code, str(exc), **detail)
