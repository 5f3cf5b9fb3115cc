import pytest

from firesnake.app import app as flask_app


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOGS_DIR", raising=False)
    return tmp_path


@pytest.fixture
def client(workdir):
    flask_app.config["TESTING"] = True
    with flask_app.test_client() as c:
        yield c
