"""Tests for the topocontainers command line interface."""

import tomllib
from pathlib import Path

import pytest
from typer.testing import CliRunner

from topocontainers._cli.demo import run_demo
from topocontainers._cli.main import app

runner = CliRunner()


@pytest.fixture
def list_document(tmp_path: Path) -> Path:
    path = tmp_path / "order.toml"
    path.write_text(
        """
kind = "list"
edges = [["F", "C"], ["F", "A"], ["E", "A"], ["E", "B"], ["C", "D"], ["D", "B"]]
items = ["A", "B", "C", "D", "E", "F", "A"]
""",
    )
    return path


@pytest.fixture
def cyclic_document(tmp_path: Path) -> Path:
    path = tmp_path / "cyclic.toml"
    path.write_text(
        """
edges = [["a", "b"], ["b", "c"], ["c", "a"]]
items = ["a", "b", "c"]
""",
    )
    return path


class TestSortCommand:
    """Tests for `topocontainers sort`."""

    def test_prints_sorted_result(self, list_document: Path) -> None:
        result = runner.invoke(app, ["sort", str(list_document)])

        assert result.exit_code == 0
        assert "[F, E, A, A, C, D, B]" in result.output

    def test_exports_result(self, list_document: Path, tmp_path: Path) -> None:
        output = tmp_path / "result.toml"

        result = runner.invoke(app, ["sort", str(list_document), "-o", str(output)])

        assert result.exit_code == 0
        with output.open("rb") as f:
            data = tomllib.load(f)
        assert data == {"kind": "list", "result": ["F", "E", "A", "A", "C", "D", "B"]}

    def test_cycle_tolerated_by_default(self, cyclic_document: Path) -> None:
        result = runner.invoke(app, ["sort", str(cyclic_document)])

        assert result.exit_code == 0

    def test_strict_fails_on_cycle(self, cyclic_document: Path) -> None:
        result = runner.invoke(app, ["sort", str(cyclic_document), "--strict"])

        assert result.exit_code == 1
        assert "Cycle detected" in result.output

    def test_invalid_document(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text('kind = "queue"\n')

        result = runner.invoke(app, ["sort", str(path)])

        assert result.exit_code == 1
        assert "Invalid sort document" in result.output

    def test_missing_document(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["sort", str(tmp_path / "missing.toml")])

        assert result.exit_code == 1

    def test_document_and_strict_from_config(
        self,
        cyclic_document: Path,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        (tmp_path / "pyproject.toml").write_text(
            f'[tool.topocontainers]\ninput = "{cyclic_document.name}"\nstrict = true\n',
        )
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["sort"])
        assert result.exit_code == 1

        result = runner.invoke(app, ["sort", "--no-strict"])
        assert result.exit_code == 0

    def test_no_document_and_no_config(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pyproject.toml").write_text("[project]\nname = 'test'\n")
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["sort"])

        assert result.exit_code == 1
        assert "No sort document given" in result.output


class TestCheckCommand:
    """Tests for `topocontainers check`."""

    def test_acyclic(self, list_document: Path) -> None:
        result = runner.invoke(app, ["check", str(list_document)])

        assert result.exit_code == 0
        assert "acyclic" in result.output

    def test_cyclic(self, cyclic_document: Path) -> None:
        result = runner.invoke(app, ["check", str(cyclic_document)])

        assert result.exit_code == 1
        assert "a -> b -> c -> a" in result.output


class TestDemoCommand:
    """Tests for `topocontainers demo`."""

    def test_runs(self) -> None:
        result = runner.invoke(app, ["demo"])

        assert result.exit_code == 0

    def test_scenarios(self) -> None:
        rows = dict(run_demo())

        assert rows == {
            "graph": "[F, E, A, C, D, B]",
            "sorted_dict": "[(F, 5), (E, 4), (A, 0), (C, 2), (D, 3), (B, 1), (X, 100), (Y, 101), (Z, 102)]",
            "dict, Z before F": "[(Z, 102), (F, 5), (E, 4), (A, 0), (C, 2), (D, 3), (B, 1), (X, 100), (Y, 101)]",
            "list, Z absent": "[F, F, F, E, E, A, A, A, C, C, D, D, B, B]",
            "list, Z appended": "[Z, F, F, F, E, E, C, C, D, D, B, B, A, A, A]",
            "list of integers": "[9, 0, 8, 1, 7, 2, 6, 3, 5, 4]",
            "array": "[F, E, A, C, D, B, X, Y, Z]",
        }
