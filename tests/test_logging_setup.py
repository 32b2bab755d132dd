import logging

from rich.logging import RichHandler

from openapi_splitter.logging_setup import configure_logging


def _managed(root: logging.Logger) -> list[logging.Handler]:
    return [h for h in root.handlers if isinstance(h, RichHandler) and getattr(h, "_openapi_splitter_managed", False)]


class TestConfigureLogging:
    def test_debug_level(self):
        configure_logging(debug=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_level_from_env(self, monkeypatch):
        monkeypatch.setenv("OPENAPI_SPLITTER_LOG_LEVEL", "warning")
        configure_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_handler_not_stacked(self):
        configure_logging()
        configure_logging(debug=True)
        assert len(_managed(logging.getLogger())) == 1

    def test_foreign_handlers_kept(self):
        root = logging.getLogger()
        other = logging.NullHandler()
        root.addHandler(other)
        try:
            configure_logging()
            assert other in root.handlers
        finally:
            root.removeHandler(other)
