import pytest


@pytest.fixture(autouse=True)
def colors_on(monkeypatch):
    """Render with colors unless a test switches them off."""
    monkeypatch.delenv("YUMMI_NO_COLORS", raising=False)
