"""Tests for the configuration module."""

from pathlib import Path

import pytest

from topocontainers._cli.config import (
    ConfigError,
    TopoConfig,
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

        subdir = tmp_path / "docs" / "orders"
        subdir.mkdir(parents=True)

        assert find_pyproject_toml(subdir) == pyproject


class TestLoadConfig:
    """Tests for load_config."""

    def test_no_section_returns_empty_config(self, tmp_path: Path) -> None:
        """Should return defaults when [tool.topocontainers] is missing."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        config = load_config(pyproject)

        assert config == TopoConfig(project_root=tmp_path)
        assert config.strict is False

    def test_relative_paths_resolved_from_project_root(self, tmp_path: Path) -> None:
        """Should resolve input and output relative to pyproject.toml."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.topocontainers]
input = "order.toml"
output = "out/result.toml"
strict = true
""",
        )

        config = load_config(pyproject)

        assert config.input == tmp_path / "order.toml"
        assert config.output == tmp_path / "out" / "result.toml"
        assert config.strict is True

    def test_absolute_path_kept(self, tmp_path: Path) -> None:
        """Should keep absolute paths unchanged."""
        target = tmp_path / "elsewhere" / "order.toml"
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(f'[tool.topocontainers]\ninput = "{target.as_posix()}"\n')

        assert load_config(pyproject).input == target

    def test_non_string_path_raises_error(self, tmp_path: Path) -> None:
        """Should raise ConfigError for non-string paths."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.topocontainers]\noutput = 3\n")

        with pytest.raises(ConfigError, match="output: expected string path"):
            load_config(pyproject)

    def test_non_bool_strict_raises_error(self, tmp_path: Path) -> None:
        """Should raise ConfigError for a non-boolean strict flag."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool.topocontainers]\nstrict = "yes"\n')

        with pytest.raises(ConfigError, match="strict: expected boolean"):
            load_config(pyproject)

    def test_invalid_toml_raises_error(self, tmp_path: Path) -> None:
        """Should raise ConfigError for malformed TOML."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.topocontainers\n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(pyproject)


class TestGetConfig:
    """Tests for get_config."""

    def test_reads_from_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should discover pyproject.toml from the current directory."""
        (tmp_path / "pyproject.toml").write_text("[tool.topocontainers]\nstrict = true\n")
        monkeypatch.chdir(tmp_path)

        config = get_config()

        assert config.strict is True
        assert config.project_root == tmp_path.resolve()
