"""${ENV_VAR} resolution over the raw config tree, tracking where each reference sits.

Provider API keys are the usual target (``providers.claude.api_key:
${ANTHROPIC_API_KEY}``), but any string leaf may carry references. Unset
variables are reported with the dotted key path that used them so the error
can point at the offending config entry.
"""

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TypeAlias

_ENV_REF = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

RawValue: TypeAlias = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


@dataclass(frozen=True)
class EnvResolution:
    """Outcome of one resolution pass.

    ``data`` has every set reference substituted; unset references are left
    empty and listed in ``unset`` as variable name → key paths.
    """

    data: RawValue
    unset: dict[str, list[str]] = field(default_factory=dict)

    @property
    def missing_vars(self) -> list[str]:
        return list(self.unset)


def resolve_env_refs(
    data: RawValue, environ: Mapping[str, str] | None = None
) -> EnvResolution:
    """Substitute ${VAR} references throughout ``data`` in a single walk."""
    env = os.environ if environ is None else environ
    unset: dict[str, list[str]] = {}
    resolved = _resolve(data, path="", env=env, unset=unset)
    return EnvResolution(data=resolved, unset=unset)


def _resolve(
    data: RawValue,
    path: str,
    env: Mapping[str, str],
    unset: dict[str, list[str]],
) -> RawValue:
    if isinstance(data, str):

        def substitute(match: re.Match[str]) -> str:
            name = match.group(1)
            if name in env:
                return env[name]
            paths = unset.setdefault(name, [])
            if path not in paths:
                paths.append(path)
            return ""

        return _ENV_REF.sub(substitute, data)
    if isinstance(data, list):
        return [
            _resolve(item, path=f"{path}[{index}]", env=env, unset=unset)
            for index, item in enumerate(data)
        ]
    if isinstance(data, dict):
        return {
            key: _resolve(value, path=_join(path, key), env=env, unset=unset)
            for key, value in data.items()
        }
    return data


def _join(path: str, key: object) -> str:
    return f"{path}.{key}" if path else str(key)
