import pytest
import requests

from optica.common.settings import Settings, get_settings
from optica.db.sources.viacep_client import ViaCEPClient, ViaCEPClientConfig

SAMPLE_ADDRESS = {
    "cep": "01001-000",
    "logradouro": "Praça da Sé",
    "complemento": "lado ímpar",
    "bairro": "Sé",
    "localidade": "São Paulo",
    "uf": "SP",
    "ibge": "3550308",
    "gia": "1004",
    "ddd": "11",
    "siafi": "7107",
}


class DummyResponse:
    def __init__(self, payload=None, status_code=200, json_error=None):
        self._payload = payload
        self.status_code = status_code
        self._json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self._json_error is not None:
            raise self._json_error
        return self._payload


class DummySession:
    """Replays canned responses; an exception instance is raised instead of returned."""

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, timeout))
        if not self.responses:
            return DummyResponse({}, status_code=404)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def sample_address():
    return dict(SAMPLE_ADDRESS)


@pytest.fixture
def make_client():
    def factory(*responses):
        session = DummySession(responses)
        client = ViaCEPClient(config=ViaCEPClientConfig(base_url="https://viacep.test/ws"), session=session)
        return client, session

    return factory


@pytest.fixture
def settings():
    return Settings(viacep_base_url="https://viacep.test/ws", log_json=False)


@pytest.fixture(autouse=True)
def reset_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class FakeCursor:
    def __init__(self, conn):
        self.conn = conn
        self._row = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=None):
        self.conn.statements.append(sql)
        if sql.startswith("SELECT"):
            table, column = params
            self._row = (column,) if (table, column) in self.conn.columns else None
        elif sql.startswith("ALTER"):
            if self.conn.fail_on_alter:
                raise RuntimeError("permission denied")
            parts = sql.split()
            self.conn.columns.add((parts[2], parts[5]))

    def fetchone(self):
        return self._row


class FakeConnection:
    """Just enough of a DB-API connection over an in-memory column catalog."""

    def __init__(self, columns=(), fail_on_alter=False):
        self.columns = set(columns)
        self.fail_on_alter = fail_on_alter
        self.statements = []
        self.commits = 0
        self.rollbacks = 0
        self.closed = False

    def cursor(self):
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        self.closed = True
