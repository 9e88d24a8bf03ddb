"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

from nxgraph._algorithms import SearchMethod


class ConfigError(Exception):
    """Error in nxgraph configuration."""


@dataclass(slots=True, frozen=True)
class NxgraphConfig:
    """Configuration loaded from the [tool.nxgraph] table of pyproject.toml.

    Unset values are None so command line options can fall back to
    their own defaults.
    """

    method: SearchMethod | None = None
    directed: bool | None = None
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            # Reached filesystem root
            return None
        current = parent


def _parse_method(value: object) -> SearchMethod:
    if not isinstance(value, str):
        msg = "Invalid [tool.nxgraph].method: expected string"
        raise ConfigError(msg)
    try:
        return SearchMethod(value.lower())
    except ValueError:
        choices = ", ".join(f"'{m.value}'" for m in SearchMethod)
        msg = f"Invalid [tool.nxgraph].method '{value}'. Expected one of: {choices}"
        raise ConfigError(msg) from None


def load_config(pyproject_path: Path) -> NxgraphConfig:
    """Load and validate [tool.nxgraph] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed NxgraphConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("nxgraph", {})
    if not isinstance(section, dict):
        msg = "Invalid [tool.nxgraph]: expected a table"
        raise ConfigError(msg)

    method: SearchMethod | None = None
    if "method" in section:
        method = _parse_method(section["method"])

    directed: bool | None = None
    if "directed" in section:
        directed = section["directed"]
        if not isinstance(directed, bool):
            msg = "Invalid [tool.nxgraph].directed: expected boolean"
            raise ConfigError(msg)

    return NxgraphConfig(method=method, directed=directed, project_root=project_root)


def get_config() -> NxgraphConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        NxgraphConfig (may be empty if no pyproject.toml or no [tool.nxgraph] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return NxgraphConfig()
    return load_config(pyproject_path)
