import pytest

@pytest.fixture(autouse=True)
def _fixed_user(monkeypatch):
    # getpass.getuser() consults LOGNAME first
    monkeypatch.setenv("LOGNAME", "tester")
