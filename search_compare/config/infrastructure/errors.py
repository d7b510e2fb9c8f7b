"""Error types raised by config infrastructure."""

from pathlib import Path

from search_compare.core.errors import SearchCompareError


class MissingEnvVarsError(SearchCompareError):
    """Raised when one or more required environment variables are not set."""

    def __init__(
        self, missing_vars: list[str], used_by: dict[str, list[str]] | None = None
    ) -> None:
        self.missing_vars = missing_vars
        self.used_by = used_by or {}
        var_list = ", ".join(
            _describe_var(name=name, paths=self.used_by.get(name, []))
            for name in sorted(missing_vars)
        )
        super().__init__(
            f"Failed to load config: missing environment variables: {var_list}"
        )


class ConfigValidationError(SearchCompareError):
    """Raised when the loaded config does not match the schema."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to validate config: {reason}")


class ConfigLoadError(SearchCompareError):
    """Raised when the config file cannot be found or parsed."""

    def __init__(self, path: Path, reason: str = "file not found") -> None:
        self.path = path
        super().__init__(f"Failed to load config: {reason}: {path}")


def _describe_var(name: str, paths: list[str]) -> str:
    return f"{name} (used by {', '.join(paths)})" if paths else name
