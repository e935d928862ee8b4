import pytest


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    # no ambient hilite.yaml / $HILITE_CONFIG leaks into tests
    monkeypatch.delenv("HILITE_CONFIG", raising=False)
    monkeypatch.delenv("HILITE_DEBUG", raising=False)
    monkeypatch.chdir(tmp_path)
