import json

import pytest
import requests

from optica.backend import cli
from optica.backend.services.address_service import AddressService
from optica.common.exceptions import ConfigurationError
from optica.db import migrations

from conftest import DummyResponse, FakeConnection


@pytest.fixture(autouse=True)
def plain_logs(monkeypatch):
    monkeypatch.setenv("LOG_JSON", "false")


def use_responses(monkeypatch, make_client, settings, *responses):
    viacep, session = make_client(*responses)
    monkeypatch.setattr(cli, "AddressService", lambda: AddressService(client=viacep, settings=settings))
    return session


def test_cli_mask(capsys):
    exit_code = cli.main(["mask", "phone", "1133334444"])
    data = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert data == {"masked": "(11) 3333-4444", "unmasked": "1133334444"}


def test_cli_validate(capsys):
    assert cli.main(["validate", "cpf", "529.982.247-25"]) == 0
    assert json.loads(capsys.readouterr().out)["valid"] is True

    assert cli.main(["validate", "cpf", "123.456.789-00"]) == 1
    assert json.loads(capsys.readouterr().out)["valid"] is False


def test_cli_rejects_unknown_mask():
    with pytest.raises(SystemExit):
        cli.main(["mask", "rg", "123"])


def test_cli_lookup_found(monkeypatch, capsys, make_client, settings, sample_address):
    use_responses(monkeypatch, make_client, settings, DummyResponse(sample_address))

    exit_code = cli.main(["--pretty", "lookup", "01001-000"])
    output = capsys.readouterr().out

    assert exit_code == 0
    assert json.loads(output) == sample_address
    assert "\n  " in output


def test_cli_lookup_reports_status(monkeypatch, capsys, make_client, settings):
    use_responses(monkeypatch, make_client, settings, requests.Timeout("slow"))

    exit_code = cli.main(["lookup", "01001000"])
    data = json.loads(capsys.readouterr().out)

    assert exit_code == 1
    assert data["status"] == "error"


def test_cli_lookup_invalid_cep(monkeypatch, capsys, make_client, settings):
    session = use_responses(monkeypatch, make_client, settings)

    assert cli.main(["lookup", "123"]) == 1
    assert json.loads(capsys.readouterr().out)["status"] == "not_found"
    assert session.calls == []


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["currency", "1234.5"], "R$ 1.234,50"),
        (["currency", "abc"], "R$ NaN"),
        (["date", "2025-07-08T10:00:00Z"], "08/07/2025"),
        (["datetime", "2025-07-08T10:00:00"], "08/07/2025 10:00"),
    ],
)
def test_cli_formatters(capsys, argv, expected):
    assert cli.main(argv) == 0
    assert capsys.readouterr().out.strip() == expected


def test_cli_migrate(monkeypatch, capsys):
    conn = FakeConnection(columns={("purchase_orders", "installments")})
    monkeypatch.setattr(migrations, "connect", lambda: conn)

    exit_code = cli.main(["migrate"])
    data = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert data["applied"] == ["accounts_payable.purchase_order_id", "purchase_orders.payment_date"]
    assert conn.closed


def test_cli_migrate_without_database(monkeypatch, capsys):
    def missing():
        raise ConfigurationError("DATABASE_URL não configurada.")

    monkeypatch.setattr(migrations, "connect", missing)

    assert cli.main(["migrate"]) == 1
    assert "DATABASE_URL" in capsys.readouterr().out
