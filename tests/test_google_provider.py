"""Testes unitários para GoogleSheetProvider."""

from unittest.mock import Mock

import pytest

from sheetclient.exceptions import AuthError, SheetApiError
from sheetclient.gateway.connection import BASE_URL
from sheetclient.providers.google import GoogleSheetProvider
from sheetclient.types import (
    AddRowsOptions,
    CreateSheetOptions,
    DeleteRowsOptions,
    ReadDataOptions,
    UpdateCellsOptions,
)

CREDENTIALS = {"access_token": "fake-token"}
ROWS = [
    {"name": "Alice", "email": "alice@example.com"},
    {"name": "Bob", "email": "bob@example.com"},
]
ADD_OPTIONS = AddRowsOptions(
    spreadsheet_id="fake-sheet-id",
    sheet_name="TestSheet",
    header_map={"name": "Name", "email": "Email"},
)


@pytest.fixture
def provider(session):
    return GoogleSheetProvider(CREDENTIALS, session=session)


class TestConstruction:
    """Testes para a construção do provider."""

    def test_missing_credentials_raise_auth_error(self, session):
        """Credenciais ausentes são rejeitadas na construção, sem rede."""
        with pytest.raises(AuthError):
            GoogleSheetProvider({}, session=session)

        session.request.assert_not_called()

    def test_service_account_uses_injected_exchange(self, session, make_response):
        """A troca de token injetada deve ser usada e seu resultado reutilizado."""
        exchange = Mock(return_value=("sa-token", None))
        provider = GoogleSheetProvider(
            {"private_key": "key", "client_email": "robot@example.com"},
            session=session,
            token_exchange=exchange,
        )
        session.request.return_value = make_response(200, {"values": []})

        provider.read_data(ReadDataOptions("fake-sheet-id", "TestSheet"))
        provider.read_data(ReadDataOptions("fake-sheet-id", "TestSheet"))

        exchange.assert_called_once()
        headers = session.request.call_args.kwargs["headers"]
        assert headers["Authorization"] == "Bearer sa-token"


class TestAddRows:
    """Testes para add_rows."""

    def test_add_rows_with_header_to_empty_sheet(self, provider, session, make_response):
        """Aba vazia: a linha de cabeçalho precede os dados."""
        session.request.side_effect = [
            make_response(200, {"range": "TestSheet!A1:Z1000", "majorDimension": "ROWS"}),
            make_response(200, {"updates": {}}),
        ]

        provider.add_rows(ADD_OPTIONS, ROWS)

        check_call, append_call = session.request.call_args_list
        assert check_call.args == (
            "GET",
            f"{BASE_URL}/fake-sheet-id/values/TestSheet?majorDimension=ROWS",
        )
        assert append_call.args == (
            "POST",
            f"{BASE_URL}/fake-sheet-id/values/TestSheet:append?valueInputOption=USER_ENTERED",
        )
        assert append_call.kwargs["json"] == {
            "values": [
                ["Name", "Email"],
                ["Alice", "alice@example.com"],
                ["Bob", "bob@example.com"],
            ]
        }
        assert append_call.kwargs["headers"] == {
            "Authorization": "Bearer fake-token",
            "Content-Type": "application/json",
        }

    def test_add_rows_with_header_to_non_empty_sheet(self, provider, session, make_response):
        """Aba com conteúdo: somente os dados são acrescentados."""
        session.request.side_effect = [
            make_response(200, {"values": [["Name", "Email"]]}),
            make_response(200, {}),
        ]

        provider.add_rows(ADD_OPTIONS, ROWS)

        append_call = session.request.call_args_list[1]
        assert append_call.kwargs["json"] == {
            "values": [["Alice", "alice@example.com"], ["Bob", "bob@example.com"]]
        }

    def test_add_rows_without_header_map_skips_check(self, provider, session, make_response):
        """Sem header_map não há leitura prévia e os valores seguem a ordem das chaves."""
        session.request.return_value = make_response(200, {})

        provider.add_rows(AddRowsOptions("fake-sheet-id", "TestSheet"), ROWS)

        assert session.request.call_count == 1
        assert session.request.call_args.kwargs["json"] == {
            "values": [["Alice", "alice@example.com"], ["Bob", "bob@example.com"]]
        }

    def test_add_rows_append_failure(self, provider, session, make_response):
        session.request.side_effect = [
            make_response(200, {}),
            make_response(403, text="The caller does not have permission"),
        ]

        with pytest.raises(SheetApiError) as exc_info:
            provider.add_rows(ADD_OPTIONS, ROWS)

        assert exc_info.value.status == 403
        assert exc_info.value.body == "The caller does not have permission"

    def test_add_rows_check_failure(self, provider, session, make_response):
        """Falha na verificação de aba vazia interrompe a operação."""
        session.request.return_value = make_response(404, text="Unable to parse range")

        with pytest.raises(SheetApiError):
            provider.add_rows(ADD_OPTIONS, ROWS)

        assert session.request.call_count == 1


class TestUpdateCells:
    """Testes para update_cells."""

    def test_update_cells_with_range(self, provider, session, make_response):
        session.request.return_value = make_response(200, {})

        provider.update_cells(UpdateCellsOptions(
            spreadsheet_id="fake-sheet-id",
            sheet_name="TestSheet",
            range="TestSheet!A2:B2",
            values=[["Alice", "alice@example.com"]],
        ))

        method, url = session.request.call_args.args
        assert method == "PUT"
        assert url == f"{BASE_URL}/fake-sheet-id/values/TestSheet%21A2%3AB2?valueInputOption=USER_ENTERED"
        assert session.request.call_args.kwargs["json"] == {"values": [["Alice", "alice@example.com"]]}

    def test_update_cells_defaults_to_sheet_name(self, provider, session, make_response):
        session.request.return_value = make_response(200, {})

        provider.update_cells(UpdateCellsOptions("fake-sheet-id", "TestSheet", [["x"]]))

        assert "/values/TestSheet?" in session.request.call_args.args[1]

    def test_update_cells_error(self, provider, session, make_response):
        session.request.return_value = make_response(400, text="Invalid range")

        with pytest.raises(SheetApiError, match="400 Invalid range"):
            provider.update_cells(UpdateCellsOptions("fake-sheet-id", "TestSheet", [["x"]]))


class TestReadData:
    """Testes para read_data."""

    def test_read_data_with_header_row(self, provider, session, make_response):
        session.request.return_value = make_response(200, {
            "values": [["Name", "Email"], ["Alice", "alice@example.com"], ["Bob", "bob@example.com"]]
        })

        result = provider.read_data(ReadDataOptions("fake-sheet-id", "TestSheet"))

        assert result == [
            {"Name": "Alice", "Email": "alice@example.com"},
            {"Name": "Bob", "Email": "bob@example.com"},
        ]

    def test_read_data_empty_sheet(self, provider, session, make_response):
        session.request.return_value = make_response(200, {"range": "TestSheet!A1:Z1000"})

        assert provider.read_data(ReadDataOptions("fake-sheet-id", "TestSheet")) == []

    def test_read_data_uses_range(self, provider, session, make_response):
        session.request.return_value = make_response(200, {"values": [["Name"]]})

        result = provider.read_data(ReadDataOptions("fake-sheet-id", "TestSheet", range="TestSheet!A1:A10"))

        assert result == []
        assert session.request.call_args.args[1] == (
            f"{BASE_URL}/fake-sheet-id/values/TestSheet%21A1%3AA10?majorDimension=ROWS"
        )

    def test_read_data_error_keeps_provider_usable(self, provider, session, make_response):
        """Após uma falha, o provider continua utilizável."""
        session.request.side_effect = [
            make_response(500, text="backend error"),
            make_response(200, {"values": [["Name"], ["Alice"]]}),
        ]

        with pytest.raises(SheetApiError) as exc_info:
            provider.read_data(ReadDataOptions("fake-sheet-id", "TestSheet"))
        assert exc_info.value.status == 500

        assert provider.read_data(ReadDataOptions("fake-sheet-id", "TestSheet")) == [{"Name": "Alice"}]


class TestDeleteRows:
    """Testes para delete_rows."""

    def test_delete_rows_empty_list_is_noop(self, provider, session):
        provider.delete_rows(DeleteRowsOptions("fake-sheet-id", "TestSheet", []))

        session.request.assert_not_called()

    def test_delete_rows_sends_batch_update(self, provider, session, make_response):
        session.request.side_effect = [
            make_response(200, {"sheets": [{"properties": {"sheetId": 9, "title": "TestSheet"}}]}),
            make_response(200, {}),
        ]

        provider.delete_rows(DeleteRowsOptions("fake-sheet-id", "TestSheet", [3, 7]))

        batch_call = session.request.call_args_list[1]
        assert batch_call.args == ("POST", f"{BASE_URL}/fake-sheet-id:batchUpdate")
        starts = [r["deleteDimension"]["range"]["startIndex"] for r in batch_call.kwargs["json"]["requests"]]
        assert starts == [6, 2]


class TestCreateSheet:
    """Testes para create_sheet."""

    def test_create_sheet(self, provider, session, make_response):
        session.request.side_effect = [
            make_response(200, {"sheets": [{"properties": {"sheetId": 0, "title": "Sheet1"}}]}),
            make_response(200, {"replies": [{}]}),
        ]

        provider.create_sheet(CreateSheetOptions("fake-sheet-id", "TestSheet"))

        assert session.request.call_args.kwargs["json"] == {
            "requests": [{"addSheet": {"properties": {"title": "TestSheet"}}}]
        }


class TestMapHeaders:
    def test_map_headers_static(self):
        assert GoogleSheetProvider.map_headers({"name": "Alice"}, {"name": "Name"}) == {"Name": "Alice"}
