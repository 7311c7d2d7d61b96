"""Unit tests for logging configuration."""

import json
from collections.abc import Generator
from pathlib import Path

import pytest
from loguru import logger

from address_registry.core.logging import setup_logging


@pytest.fixture(autouse=True)
def _restore_logger() -> Generator[None]:
    yield
    logger.remove()


class TestLogging:
    """Tests for Loguru logging setup."""

    def test_setup_logging_does_not_raise(self) -> None:
        """setup_logging with valid log level does not raise."""
        setup_logging("DEBUG")
        setup_logging("INFO")
        setup_logging("WARNING")

    def test_setup_logging_case_insensitive(self) -> None:
        """setup_logging accepts case-insensitive log levels."""
        setup_logging("info")
        setup_logging("debug")

    def test_log_dir_writes_file(self, tmp_path: Path) -> None:
        """A log_dir enables the rotating file sink."""
        log_dir = tmp_path / "logs"
        setup_logging("INFO", str(log_dir))

        logger.info("region cache loaded")
        logger.complete()

        log_file = log_dir / "address-registry.log"
        assert log_file.exists()
        assert "region cache loaded" in log_file.read_text(encoding="utf-8")

    def test_level_filters_file_sink(self, tmp_path: Path) -> None:
        setup_logging("WARNING", str(tmp_path))

        logger.info("progress message")
        logger.warning("duplicate address")

        content = (tmp_path / "address-registry.log").read_text(encoding="utf-8")
        assert "duplicate address" in content
        assert "progress message" not in content

    def test_import_stats_written_as_json_lines(self, tmp_path: Path) -> None:
        """Records bound with import_stats land in the JSON lines file."""
        setup_logging("WARNING", str(tmp_path))

        logger.bind(import_stats={"imported": 3, "duplicates": 1}).info("[addr-imp] Import complete")
        logger.info("region cache loaded")

        lines = (tmp_path / "import-stats.jsonl").read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        record = json.loads(lines[0])["record"]
        assert record["extra"]["import_stats"] == {"imported": 3, "duplicates": 1}
        assert record["message"] == "[addr-imp] Import complete"

    def test_no_files_without_log_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        setup_logging("INFO")

        logger.bind(import_stats={"imported": 1}).info("done")

        assert list(tmp_path.iterdir()) == []
