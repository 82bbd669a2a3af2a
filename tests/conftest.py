import pytest

from config.settings import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from BSTREE_* env vars and the settings cache."""
    for var in ("BSTREE_TRAVERSAL_MODE", "BSTREE_LOG_LEVEL", "BSTREE_LOG_FILE"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
