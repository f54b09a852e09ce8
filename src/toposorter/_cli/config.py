"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from enum import StrEnum, unique
from pathlib import Path


class ConfigError(Exception):
    """Error in toposorter configuration."""


@unique
class Strategy(StrEnum):
    """Which sorter the CLI runs."""

    KEYED = "keyed"
    BFS = "bfs"
    DFS = "dfs"


@dataclass(slots=True, frozen=True)
class ToposorterConfig:
    """Configuration loaded from pyproject.toml.

    Relative paths are resolved from the project root (directory containing pyproject.toml).
    """

    strategy: Strategy = Strategy.KEYED
    output: Path | None = None
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


def _parse_strategy(value: object) -> Strategy:
    if not isinstance(value, str):
        msg = "Invalid [tool.toposorter].strategy: expected string"
        raise ConfigError(msg)
    try:
        return Strategy(value)
    except ValueError:
        choices = ", ".join(s.value for s in Strategy)
        msg = f"Invalid [tool.toposorter].strategy '{value}'. Expected one of: {choices}"
        raise ConfigError(msg) from None


def load_config(pyproject_path: Path) -> ToposorterConfig:
    """Load and validate [tool.toposorter] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed ToposorterConfig

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

    section = data.get("tool", {}).get("toposorter", {})
    if not section:
        return ToposorterConfig(project_root=project_root)

    unknown = set(section) - {"strategy", "output"}
    if unknown:
        msg = f"Unknown [tool.toposorter] key(s): {', '.join(sorted(unknown))}"
        raise ConfigError(msg)

    strategy = Strategy.KEYED
    if "strategy" in section:
        strategy = _parse_strategy(section["strategy"])

    output_path: Path | None = None
    if "output" in section:
        output_value = section["output"]
        if not isinstance(output_value, str):
            msg = "Invalid [tool.toposorter].output: expected string path"
            raise ConfigError(msg)
        output_path = Path(output_value)
        if not output_path.is_absolute():
            output_path = project_root / output_path

    return ToposorterConfig(strategy=strategy, output=output_path, project_root=project_root)


def get_config(start_dir: Path | None = None) -> ToposorterConfig:
    """Get config from pyproject.toml in start_dir or its parents.

    Returns:
        ToposorterConfig (defaults if no pyproject.toml or no [tool.toposorter] section)

    """
    pyproject_path = find_pyproject_toml(start_dir)
    if pyproject_path is None:
        return ToposorterConfig()
    return load_config(pyproject_path)
