"""Tests for cra_core.paths — home directory, debug flag, logger setup."""

import logging

from cra_core import paths


class TestHome:
    def test_env_override(self, cra_home):
        assert paths.cra_home() == cra_home
        assert cra_home.is_dir()

    def test_debug_dir_created(self, cra_home):
        assert paths.debug_dir() == cra_home / "debug"
        assert (cra_home / "debug").is_dir()

    def test_log_file(self, cra_home):
        assert paths.log_file() == cra_home / "debug" / "cra.log"
        assert paths.log_file("other.log").name == "other.log"


class TestDebugEnabled:
    def test_off_by_default(self):
        assert paths.debug_enabled() is False

    def test_flag_file(self):
        paths.set_debug(True)
        assert paths.debug_enabled() is True
        paths.set_debug(False)
        assert paths.debug_enabled() is False

    def test_env_var(self, monkeypatch):
        monkeypatch.setenv("CRA_DEBUG", "yes")
        assert paths.debug_enabled() is True

    def test_env_var_overrides_flag_file(self, monkeypatch):
        paths.set_debug(True)
        monkeypatch.setenv("CRA_DEBUG", "0")
        assert paths.debug_enabled() is False


class TestConfigureLogger:
    def test_writes_to_log_file(self, cra_home):
        logger = paths.configure_logger("cra.test.write", "test.log")
        try:
            logger.info("hello from test")
            for h in logger.handlers:
                h.flush()
            line = (cra_home / "debug" / "test.log").read_text().splitlines()[-1]
            assert line.endswith(" INFO cra.test.write hello from test")
            assert logger.propagate is False
            assert logger.level == logging.INFO
        finally:
            for h in list(logger.handlers):
                h.close()
                logger.removeHandler(h)

    def test_debug_level(self, monkeypatch):
        monkeypatch.setenv("CRA_DEBUG", "1")
        logger = paths.configure_logger("cra.test.debug", "test.log")
        try:
            assert logger.level == logging.DEBUG
        finally:
            for h in list(logger.handlers):
                h.close()
                logger.removeHandler(h)

    def test_no_duplicate_handlers(self):
        logger = paths.configure_logger("cra.test.dupes", "test.log")
        try:
            paths.configure_logger("cra.test.dupes", "test.log")
            assert len(logger.handlers) == 1
        finally:
            for h in list(logger.handlers):
                h.close()
                logger.removeHandler(h)
