"""Tests for the generate CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from archlab.cli import cli


@pytest.mark.usefixtures("_isolated_project")
class TestGenerateCommand:
    def test_listing(self, cli_runner: CliRunner, snapshot_file: Path) -> None:
        result = cli_runner.invoke(cli, ["generate", str(snapshot_file)])
        assert result.exit_code == 0
        assert "/Domain/ValueObjects/Money.cs" in result.output
        assert "5 file(s)" in result.output

    def test_json(self, cli_runner: CliRunner, snapshot_file: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "generate", str(snapshot_file)])
        data = json.loads(result.output)
        assert data["ok"] is True
        assert [f["path"] for f in data["data"]["files"]][-1] == (
            "/Application/UseCases/RequestRideUseCase.cs"
        )

    def test_quiet_prints_paths(self, cli_runner: CliRunner, snapshot_file: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "generate", str(snapshot_file)])
        assert result.output.splitlines()[0] == "/Domain/ValueObjects/Money.cs"
        assert len(result.output.splitlines()) == 5

    def test_print_sources(self, cli_runner: CliRunner, snapshot_file: Path) -> None:
        result = cli_runner.invoke(cli, ["generate", str(snapshot_file), "--print"])
        assert result.exit_code == 0
        assert "public readonly record struct Money(decimal Amount, string Currency)" in (
            result.output
        )
        assert "public interface IRideRepository" in result.output

    def test_output_dir(
        self, cli_runner: CliRunner, snapshot_file: Path, tmp_path: Path
    ) -> None:
        out = tmp_path / "generated"
        result = cli_runner.invoke(cli, ["generate", str(snapshot_file), "--output", str(out)])
        assert result.exit_code == 0
        assert "written to" in result.output
        assert (out / "Application" / "Ports" / "IRideRepository.cs").is_file()

    def test_template_dir_from_config(
        self, cli_runner: CliRunner, snapshot_file: Path, tmp_path: Path
    ) -> None:
        (tmp_path / "tpl").mkdir()
        (tmp_path / "tpl" / "value_object.cs.j2").write_text("// vo {{ name }}\n")
        (tmp_path / "archlab.toml").write_text('[codegen]\ntemplate_dir = "tpl"\n')
        result = cli_runner.invoke(cli, ["generate", str(snapshot_file), "--print"])
        assert result.exit_code == 0
        assert "// vo Money" in result.output

    def test_warnings_to_stderr(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "dangling.json"
        path.write_text(
            json.dumps(
                {
                    "aggregates": [{"id": "a", "name": "Orphan", "rootEntityId": "gone"}],
                    "meta": {"name": "Dangling"},
                }
            ),
            encoding="utf-8",
        )
        result = cli_runner.invoke(cli, ["generate", str(path)])
        assert result.exit_code == 0
        assert "/Domain/Aggregates/Orphan.cs" in result.stdout
        assert "WARNING: a: Aggregate must have a valid root entity" in result.stderr

    def test_empty_graph(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "empty.json"
        path.write_text('{"meta": {"name": "Empty"}}', encoding="utf-8")
        result = cli_runner.invoke(cli, ["--json", "generate", str(path)])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["files"] == []

    def test_unknown_source(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["generate", "nothing-here"])
        assert result.exit_code == 1
        assert "No snapshot file or stored project" in result.stderr
