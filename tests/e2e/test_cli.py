# ABOUTME: End-to-end tests for the libcat CLI.
# ABOUTME: Drives every subcommand through Click's CliRunner against a temporary data directory.

from pathlib import Path

import pytest
from click.testing import CliRunner

from libcat.catalog.codec import HEADER
from libcat.cli import cli


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "library"


def run(data_dir: Path, *args: str):
    return CliRunner().invoke(cli, ["--data-dir", str(data_dir), *args])


class TestCliAdd:
    """E2e tests for `libcat add`."""

    def test_add_success(self, data_dir: Path) -> None:
        result = run(data_dir, "add", "Dune", "Herbert", "978-1")
        assert result.exit_code == 0
        assert "Added" in result.output
        assert (data_dir / "books.csv").read_text(encoding="utf-8").splitlines() == [
            HEADER,
            "Dune,Herbert,978-1,Available,0001-01-01 00:00:00",
        ]

    def test_add_duplicate_fails(self, data_dir: Path) -> None:
        run(data_dir, "add", "Dune", "Herbert", "978-1")
        result = run(data_dir, "add", "Emma", "Austen", "978-1")
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "already exists" in result.output

    def test_add_blank_title_fails(self, data_dir: Path) -> None:
        result = run(data_dir, "add", "  ", "Herbert", "978-1")
        assert result.exit_code == 1
        assert "required" in result.output

    def test_data_dir_from_environment(self, data_dir: Path) -> None:
        result = CliRunner().invoke(
            cli, ["add", "Dune", "Herbert", "978-1"],
            env={"LIBCAT_DATA_DIR": str(data_dir)},
        )
        assert result.exit_code == 0
        assert (data_dir / "books.csv").exists()


class TestCliLs:
    """E2e tests for `libcat ls`."""

    def test_ls_empty(self, data_dir: Path) -> None:
        result = run(data_dir, "ls")
        assert result.exit_code == 0
        assert "No books" in result.output

    def test_ls_shows_books(self, data_dir: Path) -> None:
        run(data_dir, "add", "Dune", "Herbert", "978-1")
        run(data_dir, "add", "Emma", "Austen", "978-4")
        result = run(data_dir, "ls")
        assert result.exit_code == 0
        assert "Dune" in result.output
        assert "Emma" in result.output
        assert "never" in result.output
        assert "2 book(s)" in result.output

    def test_ls_status_filter(self, data_dir: Path) -> None:
        run(data_dir, "add", "Dune", "Herbert", "978-1")
        run(data_dir, "add", "Emma", "Austen", "978-4")
        run(data_dir, "issue", "978-4", "Alice")

        result = run(data_dir, "ls", "--status", "Issued")
        assert result.exit_code == 0
        assert "Emma" in result.output
        assert "Dune" not in result.output
        assert "1 book(s)" in result.output

    def test_ls_skips_malformed_lines(self, data_dir: Path) -> None:
        data_dir.mkdir()
        (data_dir / "books.csv").write_text(
            f"{HEADER}\nBroken,Nobody\nDune,Herbert,978-1,Available,0001-01-01 00:00:00\n",
            encoding="utf-8",
        )
        result = run(data_dir, "ls")
        assert result.exit_code == 0
        assert "1 book(s)" in result.output
        assert "Broken,Nobody" in (data_dir / "error.txt").read_text(encoding="utf-8")


class TestCliFind:
    """E2e tests for `libcat find`."""

    def test_find_shows_fields(self, data_dir: Path) -> None:
        run(data_dir, "add", "Dune", "Herbert", "978-1")
        result = run(data_dir, "find", "978-1")
        assert result.exit_code == 0
        assert "Dune" in result.output
        assert "Herbert" in result.output
        assert "Available" in result.output

    def test_find_missing(self, data_dir: Path) -> None:
        result = run(data_dir, "find", "nope")
        assert result.exit_code == 1
        assert "not found" in result.output


class TestCliCirculation:
    """E2e tests for `libcat issue`, `libcat return`, and `libcat log`."""

    def test_issue_and_return(self, data_dir: Path) -> None:
        run(data_dir, "add", "Dune", "Herbert", "978-1")

        result = run(data_dir, "issue", "978-1", "Alice")
        assert result.exit_code == 0
        assert "Issued" in result.output
        assert "Alice" in result.output

        result = run(data_dir, "issue", "978-1", "Bob")
        assert result.exit_code == 1
        assert "not available" in result.output

        result = run(data_dir, "return", "978-1")
        assert result.exit_code == 0
        assert "Returned" in result.output

        result = run(data_dir, "return", "978-1")
        assert result.exit_code == 1
        assert "not issued" in result.output

    def test_log_write_failure_after_issue(self, data_dir: Path) -> None:
        """The issue is saved even when the transaction log cannot be written."""
        run(data_dir, "add", "Dune", "Herbert", "978-1")
        (data_dir / "transactions.txt").mkdir()

        result = run(data_dir, "issue", "978-1", "Alice")
        assert result.exit_code == 1
        assert "transaction log write failed" in result.output
        assert ",Issued," in (data_dir / "books.csv").read_text(encoding="utf-8")

        result = run(data_dir, "return", "978-1")
        assert result.exit_code == 1
        assert "Returned 978-1" in result.output
        assert "transaction log write failed" in result.output

    def test_issue_unknown_book(self, data_dir: Path) -> None:
        result = run(data_dir, "issue", "nope", "Alice")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_log_lists_transactions(self, data_dir: Path) -> None:
        run(data_dir, "add", "Dune", "Herbert", "978-1")
        run(data_dir, "issue", "978-1", "Alice")
        run(data_dir, "return", "978-1")

        result = run(data_dir, "log")
        assert result.exit_code == 0
        lines = [line for line in result.output.splitlines() if line]
        assert len(lines) == 2
        assert "ISSUED: ISBN: 978-1, Title: Dune, Borrowed By: Alice" in lines[0]
        assert "RETURNED: ISBN: 978-1, Title: Dune" in lines[1]

    def test_log_tail(self, data_dir: Path) -> None:
        run(data_dir, "add", "Dune", "Herbert", "978-1")
        run(data_dir, "issue", "978-1", "Alice")
        run(data_dir, "return", "978-1")

        result = run(data_dir, "log", "--tail", "1")
        assert result.exit_code == 0
        assert "RETURNED" in result.output
        assert "ISSUED" not in result.output

    def test_log_empty(self, data_dir: Path) -> None:
        result = run(data_dir, "log")
        assert result.exit_code == 0
        assert "No transactions" in result.output


class TestCliRoot:
    """E2e tests for root group options."""

    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("add", "ls", "find", "issue", "return", "log"):
            assert name in result.output

    def test_unreadable_books_file(self, data_dir: Path) -> None:
        (data_dir / "books.csv").mkdir(parents=True)
        result = run(data_dir, "ls")
        assert result.exit_code == 1
        assert "Error loading books" in result.output
