"""YAML config loader — parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from search_compare.config.domain.config import SearchConfig
from search_compare.config.domain.observer import ConfigObserver
from search_compare.config.infrastructure.env_interpolation import (
    resolve_env_refs,
)
from search_compare.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns a SearchConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> SearchConfig:
        """Load a SearchConfig from ``path``.

        An empty file yields the defaults.

        Raises:
            ConfigLoadError: if the file is missing or is not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the schema is violated.
        """
        raw = _parse_yaml(path=path)
        resolution = resolve_env_refs(raw)
        if resolution.unset:
            raise MissingEnvVarsError(
                resolution.missing_vars, used_by=resolution.unset
            )
        cfg = _build_config(resolved=resolution.data)
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(path=str(path), providers=list(cfg.providers))
        return cfg


def _parse_yaml(path: Path) -> Any:
    if not path.is_file():
        raise ConfigLoadError(path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path, reason=f"invalid YAML ({exc})") from exc
    return {} if raw is None else raw


def _build_config(resolved: Any) -> SearchConfig:
    try:
        return SearchConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _emit_warnings(cfg: SearchConfig, observer: ConfigObserver) -> None:
    if cfg.judge.temperature > 0.0:
        observer.config_judge_temperature_warning(cfg.judge.temperature)
