"""Tests for the configuration module."""

from pathlib import Path

import pytest

from toposorter._cli.config import (
    ConfigError,
    Strategy,
    ToposorterConfig,
    find_pyproject_toml,
    get_config,
    load_config,
)


class TestFindPyprojectToml:
    """Tests for find_pyproject_toml function."""

    def test_finds_in_current_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in current directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        assert find_pyproject_toml(tmp_path) == pyproject

    def test_finds_in_parent_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in parent directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        subdir = tmp_path / "src" / "pkg"
        subdir.mkdir(parents=True)

        assert find_pyproject_toml(subdir) == pyproject


class TestLoadConfig:
    """Tests for load_config."""

    def test_no_section_gives_defaults(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        config = load_config(pyproject)

        assert config == ToposorterConfig(project_root=tmp_path)
        assert config.strategy is Strategy.KEYED

    def test_strategy(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool.toposorter]\nstrategy = "dfs"\n')

        assert load_config(pyproject).strategy is Strategy.DFS

    def test_relative_output_resolved_from_root(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool.toposorter]\noutput = "build/order.toml"\n')

        assert load_config(pyproject).output == tmp_path / "build" / "order.toml"

    def test_absolute_output_kept(self, tmp_path: Path) -> None:
        out = tmp_path / "abs.toml"
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(f'[tool.toposorter]\noutput = "{out.as_posix()}"\n')

        assert load_config(pyproject).output == out

    def test_unknown_strategy(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool.toposorter]\nstrategy = "random"\n')

        with pytest.raises(ConfigError, match="Expected one of: keyed, bfs, dfs"):
            load_config(pyproject)

    def test_strategy_must_be_string(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.toposorter]\nstrategy = 1\n")

        with pytest.raises(ConfigError, match="expected string"):
            load_config(pyproject)

    def test_output_must_be_string(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.toposorter]\noutput = 3\n")

        with pytest.raises(ConfigError, match="expected string path"):
            load_config(pyproject)

    def test_unknown_key(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool.toposorter]\nstrategi = "bfs"\n')

        with pytest.raises(ConfigError, match="Unknown"):
            load_config(pyproject)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.toposorter\n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(pyproject)


class TestGetConfig:
    def test_reads_from_start_dir(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[tool.toposorter]\nstrategy = "bfs"\n')

        assert get_config(tmp_path).strategy is Strategy.BFS
