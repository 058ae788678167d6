"""Tests for the command line entry point."""

import logging
from pathlib import Path

from typer.testing import CliRunner

from mim import __version__
from mim.cli.app import configure_logging, create_app

runner = CliRunner()


class TestCli:
    """Tests that never enter raw mode."""

    def test_version(self) -> None:
        result = runner.invoke(create_app(), ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_unreadable_file_exits_nonzero(self, tmp_path: Path) -> None:
        result = runner.invoke(create_app(), [str(tmp_path)])
        assert result.exit_code == 1

    def test_rejects_bad_tab_stop(self) -> None:
        result = runner.invoke(create_app(), ["--tab-stop", "0", "x.txt"])
        assert result.exit_code != 0

    def test_rejects_unknown_log_level(self, tmp_path: Path) -> None:
        result = runner.invoke(
            create_app(),
            [str(tmp_path / "x.txt"), "--log-file", str(tmp_path / "mim.log"), "--log-level", "loud"],
        )
        assert result.exit_code == 2
        assert not (tmp_path / "mim.log").exists()

    def test_unopenable_log_file_exits_nonzero(self, tmp_path: Path) -> None:
        log_file = tmp_path / "missing" / "mim.log"
        result = runner.invoke(create_app(), [str(tmp_path / "x.txt"), "--log-file", str(log_file)])
        assert result.exit_code == 1
        assert not isinstance(result.exception, OSError)


class TestLogging:
    """Tests for log configuration."""

    def test_log_file_receives_package_records(self, tmp_path: Path) -> None:
        log_file = tmp_path / "mim.log"
        logger = logging.getLogger("mim")
        before = list(logger.handlers)
        try:
            configure_logging(log_file, "debug")
            logging.getLogger("mim.io.reader").info("loaded %s", "x.txt")
        finally:
            for handler in logger.handlers[len(before):]:
                handler.close()
                logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)
        content = log_file.read_text()
        assert "INFO mim.io.reader: loaded x.txt" in content

    def test_no_log_file_adds_no_handler(self) -> None:
        logger = logging.getLogger("mim")
        before = list(logger.handlers)
        configure_logging(None, "debug")
        assert logger.handlers == before
