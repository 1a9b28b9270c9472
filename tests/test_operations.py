"""Testes unitários para o módulo operations."""

from sheetclient.gateway.connection import BASE_URL
from sheetclient.gateway.operations import append_values, get_values, update_values


class TestGetValues:
    """Testes para get_values."""

    def test_get_values_success(self, session, make_response):
        session.request.return_value = make_response(200, {"values": [["Name"], ["Alice"]]})

        result = get_values(session, "tok", "sheet-id", "Contatos")

        assert result == [["Name"], ["Alice"]]
        method, url = session.request.call_args.args
        assert method == "GET"
        assert url == f"{BASE_URL}/sheet-id/values/Contatos?majorDimension=ROWS"

    def test_get_values_without_values_key(self, session, make_response):
        """Intervalo vazio: a API omite 'values'."""
        session.request.return_value = make_response(200, {"range": "Contatos!A1:Z1000"})

        assert get_values(session, "tok", "sheet-id", "Contatos") == []


class TestAppendValues:
    """Testes para append_values."""

    def test_append_values_request(self, session, make_response):
        session.request.return_value = make_response(200, {"updates": {}})

        append_values(session, "tok", "sheet-id", "Contatos", [["Alice"]], timeout=10)

        method, url = session.request.call_args.args
        assert method == "POST"
        assert url == f"{BASE_URL}/sheet-id/values/Contatos:append?valueInputOption=USER_ENTERED"
        assert session.request.call_args.kwargs["json"] == {"values": [["Alice"]]}
        assert session.request.call_args.kwargs["timeout"] == 10


class TestUpdateValues:
    """Testes para update_values."""

    def test_update_values_request(self, session, make_response):
        session.request.return_value = make_response(200, {})

        update_values(session, "tok", "sheet-id", "Contatos!A2:B2", [["Alice", "a@x.com"]])

        method, url = session.request.call_args.args
        assert method == "PUT"
        assert url == f"{BASE_URL}/sheet-id/values/Contatos%21A2%3AB2?valueInputOption=USER_ENTERED"
        assert session.request.call_args.kwargs["json"] == {"values": [["Alice", "a@x.com"]]}
