import pytest
from fastapi.testclient import TestClient

from jobly.database import get_db
from jobly.dependencies import CurrentUser, get_current_user
from jobly.main import app


class _Result:
    """Stand-in for a SQLAlchemy Result holding scripted rows."""

    def __init__(self, rows=None):
        self.rows = list(rows or [])

    def mappings(self):
        return self

    def first(self):
        return self.rows[0] if self.rows else None

    def all(self):
        return list(self.rows)


class FakeSession:
    """Records executed statements and replays scripted results in order."""

    def __init__(self, *results):
        self.results = [r if isinstance(r, _Result) else _Result(r) for r in results]
        self.executed = []
        self.committed = 0

    def execute(self, stmt, params=None):
        self.executed.append((str(stmt), dict(params or {})))
        return self.results.pop(0) if self.results else _Result()

    def commit(self):
        self.committed += 1

    @property
    def statements(self):
        return [sql for sql, _ in self.executed]


@pytest.fixture
def fake_session():
    return FakeSession


@pytest.fixture
def stub_user() -> CurrentUser:
    return CurrentUser(username="u1")


@pytest.fixture
def admin_user() -> CurrentUser:
    return CurrentUser(username="admin", is_admin=True)


def _db_override():
    yield object()


@pytest.fixture
def client():
    app.dependency_overrides[get_db] = _db_override
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def user_client(stub_user: CurrentUser):
    app.dependency_overrides[get_db] = _db_override
    app.dependency_overrides[get_current_user] = lambda: stub_user
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(admin_user: CurrentUser):
    app.dependency_overrides[get_db] = _db_override
    app.dependency_overrides[get_current_user] = lambda: admin_user
    yield TestClient(app)
    app.dependency_overrides.clear()
