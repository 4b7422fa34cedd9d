"""CheckService: graph validation following the linter pattern.

Wraps :func:`archlab.domain.validation.validate` for the CLI: loads the
graph, applies the severity threshold, and summarizes the findings.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from archlab.domain.errors import ArchlabError
from archlab.domain.types import Severity
from archlab.domain.validation import filter_findings, has_errors, validate
from archlab.services.base import BaseService
from archlab.services.result import ServiceResult

if TYPE_CHECKING:
    from archlab.domain.graph import DomainGraph

logger = logging.getLogger(__name__)


class CheckService(BaseService):
    """Reports structural errors and modeling warnings for a graph."""

    def check(
        self,
        graph: DomainGraph,
        *,
        min_severity: Severity | str = Severity.WARNING,
    ) -> ServiceResult:
        """Validate *graph* without modifying anything.

        ``healthy`` reflects the full finding set: a graph with only
        warnings is healthy even when warnings are filtered out.
        """
        findings = validate(graph)
        shown = filter_findings(findings, min_severity)
        error_count = sum(1 for f in shown if f.severity == Severity.ERROR)
        logger.debug("Validated %s: %d finding(s)", graph.meta.name, len(findings))

        return ServiceResult(
            ok=True,
            op="check",
            data={
                "project": graph.meta.name,
                "issues": [f.model_dump(mode="json", by_alias=True) for f in shown],
                "count": len(shown),
                "error_count": error_count,
                "warning_count": len(shown) - error_count,
                "healthy": not has_errors(findings),
            },
        )

    def check_source(
        self,
        source: str,
        *,
        min_severity: Severity | str = Severity.WARNING,
    ) -> ServiceResult:
        """Load *source* (file or stored project) and validate it."""
        try:
            graph = self._workspace.read_graph(source)
        except (ArchlabError, ValueError) as exc:
            return self._failure("check", exc, source=source)
        return self.check(graph, min_severity=min_severity)
