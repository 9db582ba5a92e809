import logging

import utils.logger_config as logger_config
from config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        settings = Settings(_env_file=None)

        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_DIR is None
        assert settings.CORS_ORIGINS == ["*"]

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("CORS_ORIGINS", '["http://127.0.0.1:8000"]')

        settings = Settings(_env_file=None)

        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.CORS_ORIGINS == ["http://127.0.0.1:8000"]


class TestSetupLogging:

    def test_writes_log_file(self, tmp_path, monkeypatch):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        monkeypatch.setattr(logger_config, "_initialized", False)
        try:
            logger_config.setup_logging(level="debug", log_dir=tmp_path)
            logger_config.get_logger("tests.config").debug("hello from the test")
            for handler in root.handlers:
                handler.flush()

            assert root.level == logging.DEBUG
            assert "hello from the test" in (tmp_path / "schedule.log").read_text(encoding="utf-8")
        finally:
            for handler in list(root.handlers):
                if handler not in handlers:
                    root.removeHandler(handler)
                    handler.close()
            root.setLevel(level)

    def test_runs_once(self, monkeypatch):
        root = logging.getLogger()
        monkeypatch.setattr(logger_config, "_initialized", True)
        before = list(root.handlers)

        logger_config.setup_logging()

        assert root.handlers == before
