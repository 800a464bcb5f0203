"""Shared test configuration and fixtures."""

import io
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env from project root for all tests, as the command-line tools do
root = Path(__file__).parent.parent.resolve()
load_dotenv(root / ".env")


@pytest.fixture
def run_cli(monkeypatch, capsys):
    """Return a helper that runs a ``main(argv)`` entry point on *stdin* text.

    The helper returns ``(exit_status, stdout, stderr)``.
    """

    def _run(main, stdin: str, argv: list[str]) -> tuple[int, str, str]:
        monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
        status = main(argv)
        captured = capsys.readouterr()
        return status, captured.out, captured.err

    return _run
