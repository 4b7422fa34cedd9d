"""GenerateService: compile a graph to C# source files.

Generation never waits for a clean graph: error findings are passed back
as warnings and the emitter fills unresolved references with placeholders.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import TYPE_CHECKING, Any

from archlab.domain.emitter import generate_all_code
from archlab.domain.errors import ArchlabError
from archlab.domain.types import Severity
from archlab.domain.validation import validate
from archlab.infrastructure.filesystem import write_generated_files
from archlab.services.base import BaseService
from archlab.services.result import ServiceResult

if TYPE_CHECKING:
    from pathlib import Path

    from archlab.domain.graph import DomainGraph

logger = logging.getLogger(__name__)


class GenerateService(BaseService):
    """Emits source files for every node of a graph."""

    def generate(
        self,
        graph: DomainGraph,
        *,
        output_dir: Path | None = None,
        include_content: bool = False,
    ) -> ServiceResult:
        """Emit *graph*; write the files under *output_dir* when given."""
        warnings = [
            f"{f.node_id}: {f.message}" for f in validate(graph) if f.severity == Severity.ERROR
        ]
        files = generate_all_code(graph, env=self._workspace.environment)

        path_counts = Counter(f.path for f in files)
        warnings.extend(
            f"Duplicate output path: {path}" for path, n in path_counts.items() if n > 1
        )

        listing: list[dict[str, Any]] = []
        for generated in files:
            entry: dict[str, Any] = {
                "path": generated.path,
                "lines": len(generated.content.splitlines()),
            }
            if include_content:
                entry["content"] = generated.content
            listing.append(entry)

        data: dict[str, Any] = {
            "project": graph.meta.name,
            "files": listing,
            "count": len(files),
        }

        if output_dir is not None:
            try:
                written = write_generated_files(files, output_dir)
            except (ValueError, OSError) as exc:
                return self._failure("generate", exc, output_dir=str(output_dir))
            data["output_dir"] = str(output_dir)
            data["written"] = len(written)
            logger.debug("Wrote %d file(s) to %s", len(written), output_dir)

        return ServiceResult(ok=True, op="generate", data=data, warnings=warnings)

    def generate_source(
        self,
        source: str,
        *,
        output_dir: Path | None = None,
        include_content: bool = False,
    ) -> ServiceResult:
        """Load *source* (file or stored project) and emit it."""
        try:
            graph = self._workspace.read_graph(source)
        except (ArchlabError, ValueError) as exc:
            return self._failure("generate", exc, source=source)
        return self.generate(graph, output_dir=output_dir, include_content=include_content)
