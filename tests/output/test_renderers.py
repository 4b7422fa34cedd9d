"""Tests for operation-specific Rich renderers."""

from __future__ import annotations

from archlab.output.renderers import render_quiet, render_result
from archlab.services.result import ServiceError, ServiceResult


def _check_result(issues: list[dict[str, str]], *, healthy: bool) -> ServiceResult:
    errors = sum(1 for i in issues if i["severity"] == "error")
    return ServiceResult(
        ok=True,
        op="check",
        data={
            "project": "Rides",
            "issues": issues,
            "count": len(issues),
            "error_count": errors,
            "warning_count": len(issues) - errors,
            "healthy": healthy,
        },
    )


class TestRenderCheck:
    def test_healthy(self) -> None:
        output = render_result(_check_result([], healthy=True))
        assert "OK" in output
        assert "Rides: healthy (0 error(s), 0 warning(s))" in output
        assert "Severity" not in output

    def test_issue_table(self) -> None:
        issues = [
            {
                "nodeId": "agg-1",
                "message": "Aggregate must have a valid root entity",
                "severity": "error",
            },
            {
                "nodeId": "vo-[b]",
                "message": "Value Object should have at least one field",
                "severity": "warning",
            },
        ]
        output = render_result(_check_result(issues, healthy=False))
        assert "Severity" in output
        assert "agg-1" in output
        assert "Aggregate must have a valid root entity" in output
        # Square brackets in ids are printed literally, not parsed as markup.
        assert "vo-[b]" in output
        assert "Rides: unhealthy (1 error(s), 1 warning(s))" in output


class TestRenderGenerate:
    def _result(self, **extra: object) -> ServiceResult:
        files = [{"path": "/Domain/Entities/Ride.cs", "lines": 20}]
        return ServiceResult(
            ok=True, op="generate", data={"project": "Rides", "files": files, "count": 1, **extra}
        )

    def test_listing(self) -> None:
        output = render_result(self._result())
        assert "/Domain/Entities/Ride.cs" in output
        assert "20" in output
        assert "1 file(s)" in output
        assert "written to" not in output

    def test_output_dir(self) -> None:
        output = render_result(self._result(output_dir="/tmp/out"))
        assert "1 file(s) written to /tmp/out" in output

    def test_content_printed(self) -> None:
        result = ServiceResult(
            ok=True,
            op="generate",
            data={
                "files": [{"path": "/a.cs", "lines": 1, "content": "public record A([int] X);\n"}],
                "count": 1,
            },
        )
        output = render_result(result)
        assert "// /a.cs" in output
        assert "public record A([int] X);" in output

    def test_quiet_lists_paths(self) -> None:
        assert render_quiet(self._result()) == "/Domain/Entities/Ride.cs"


class TestRenderListProjects:
    def test_empty(self) -> None:
        result = ServiceResult(ok=True, op="list_projects", data={"items": [], "count": 0})
        assert "No projects stored." in render_result(result)

    def test_items(self) -> None:
        result = ServiceResult(
            ok=True, op="list_projects", data={"items": [{"id": "a"}, {"id": "b"}], "count": 2}
        )
        output = render_result(result)
        assert "  a" in output
        assert "  b" in output
        assert render_quiet(result) == "a\nb"


class TestRenderGeneric:
    def test_graph_hidden_unless_verbose(self) -> None:
        result = ServiceResult(
            ok=True, op="load", data={"name": "p", "graph": {"meta": {"name": "p"}}}
        )
        assert "graph:" not in render_result(result)
        assert 'graph: {"meta":{"name":"p"}}' in render_result(result, verbose=True)


class TestRenderError:
    def _err(self) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op="load",
            error=ServiceError(
                code="NOT_FOUND", message="No project named 'x'", detail={"name": "x"}
            ),
        )

    def test_message(self) -> None:
        output = render_result(self._err())
        assert "ERROR" in output
        assert "No project named 'x'" in output
        assert "NOT_FOUND" not in output

    def test_verbose_detail(self) -> None:
        output = render_result(self._err(), verbose=True)
        assert "code: NOT_FOUND" in output
        assert "name: x" in output
