"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, archlab.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class StoreConfig(BaseModel):
    """[store] section."""

    model_config = {"frozen": True}

    # Relative paths resolve against the project root (the config file's directory).
    path: str = ".archlab/projects"


class CodegenConfig(BaseModel):
    """[codegen] section."""

    model_config = {"frozen": True}

    template_dir: str = ""


class CheckConfig(BaseModel):
    """[check] section."""

    model_config = {"frozen": True}

    min_severity: Literal["warning", "error"] = "warning"
