import logging
from unittest.mock import patch
from fastapi.testclient import TestClient
from journal_proxy.core.config import Settings, settings
from journal_proxy.core.logging_config import configure_logging
from journal_proxy.main import app

class TestSettings:
    """Defaults match what the scraper client expects"""

    def test_defaults(self):
        settings = Settings()
        assert settings.USER_AGENT == "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
        assert settings.FETCH_TIMEOUT_MS == 30000
        assert settings.CHECK_TIMEOUT_MS == 15000

class TestLogging:

    def test_configure_sets_level(self):
        root = logging.getLogger()
        original = root.level
        try:
            configure_logging("DEBUG")
            assert root.level == logging.DEBUG
            configure_logging("WARNING")
            assert root.level == logging.WARNING
        finally:
            root.setLevel(original)

    def test_lifespan_configures_logging(self):
        root = logging.getLogger()
        original = root.level
        try:
            root.setLevel(logging.WARNING)
            with patch.object(settings, "LOG_LEVEL", "DEBUG"):
                with TestClient(app) as client:
                    assert client.get("/health").status_code == 200
            assert root.level == logging.DEBUG
        finally:
            root.setLevel(original)
