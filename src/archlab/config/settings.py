"""ArchSettings: global CLI flags, env vars and ``archlab.toml`` in one object.

Priority chain (highest to lowest):
  1. Init kwargs: global flags passed by the root Click group
  2. Env vars: ``ARCHLAB_*``, ``__`` for nesting (``ARCHLAB_STORE__PATH``)
  3. TOML file: the ``[store]``, ``[codegen]`` and ``[check]`` tables
  4. Code defaults: baked into :mod:`archlab.config.models`
"""

from __future__ import annotations

import logging
import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from archlab.config.discovery import find_config
from archlab.config.models import CheckConfig, CodegenConfig, StoreConfig

logger = logging.getLogger(__name__)

# Tables of archlab.toml that map onto settings sections.
TOML_SECTIONS = ("store", "codegen", "check")


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source over the section tables of one ``archlab.toml``.

    Other top-level keys are ignored with a debug message, so the file can
    share space with unrelated tooling tables.
    """

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is None or not toml_path.is_file():
            return
        for key, value in _read_toml(toml_path).items():
            if key in TOML_SECTIONS:
                self._data[key] = value
            else:
                logger.debug("Ignoring unknown key %r in %s", key, toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return dict(self._data)


# The TOML path for the settings object under construction. Pydantic builds
# sources from a classmethod, so from_cli hands the path over here.
_tls = threading.local()


class ArchSettings(BaseSettings):
    """Resolved configuration for one CLI invocation.

    Attributes:
        project_root: Base for relative paths in the config: the directory
            holding ``archlab.toml``, or the CWD when there is none.
        config_path: The config file in use, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ARCHLAB_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- Global flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    store: StoreConfig = Field(default_factory=StoreConfig)
    codegen: CodegenConfig = Field(default_factory=CodegenConfig)
    check: CheckConfig = Field(default_factory=CheckConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **flags: Any,
    ) -> ArchSettings:
        """Build settings for a CLI run.

        *config_path* (``--config``) replaces discovery; a path that does
        not exist means "no config file". Without *project_root*, the
        config file's directory is used, falling back to the CWD.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(project_root)

        if project_root is None:
            project_root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(project_root=project_root, config_path=toml_path, **flags)
        finally:
            _tls.toml_path = None

    @property
    def store_path(self) -> Path:
        """Project store directory, resolved against ``project_root``."""
        return self._resolve(self.store.path)

    @property
    def template_dir(self) -> Path | None:
        """Template override directory, or None when unset."""
        return self._resolve(self.codegen.template_dir) if self.codegen.template_dir else None

    def _resolve(self, value: str) -> Path:
        path = Path(value).expanduser()
        return path if path.is_absolute() else self.project_root / path
