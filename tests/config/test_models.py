"""Tests for config section models."""

import pytest
from pydantic import ValidationError

from archlab.config.models import CheckConfig, CodegenConfig, StoreConfig


class TestDefaults:
    def test_store(self) -> None:
        assert StoreConfig().path == ".archlab/projects"

    def test_codegen(self) -> None:
        assert CodegenConfig().template_dir == ""

    def test_check(self) -> None:
        assert CheckConfig().min_severity == "warning"


class TestValidation:
    def test_severity_choices(self) -> None:
        assert CheckConfig(min_severity="error").min_severity == "error"
        with pytest.raises(ValidationError):
            CheckConfig(min_severity="info")

    def test_frozen(self) -> None:
        cfg = StoreConfig()
        with pytest.raises(ValidationError):
            cfg.path = "elsewhere"  # type: ignore[misc]
