import logging
import time
from collections.abc import Callable
from functools import partial
from typing import Any

import requests

from ..credentials import Credential, resolve_credentials
from ..gateway import operations, worksheet
from ..gateway.mapping import grid_to_rows, header_row, map_headers, rows_to_grid
from ..gateway.token import TokenExchange, TokenManager, exchange_service_account_token
from ..types import (
    AddRowsOptions,
    CreateSheetOptions,
    DeleteRowsOptions,
    Grid,
    HeaderMap,
    ReadDataOptions,
    SheetRow,
    UpdateCellsOptions,
)
from .base import BaseSheetProvider

logger = logging.getLogger(__name__)


class GoogleSheetProvider(BaseSheetProvider):
    """
    Provider para a API REST do Google Sheets (v4).

    Cada operação obtém um token do TokenManager e executa as chamadas HTTP
    correspondentes. Não há retry: qualquer resposta não-2xx vira SheetApiError.
    """

    def __init__(
        self,
        credentials: Credential | dict[str, Any] | None,
        *,
        session: requests.Session | None = None,
        timeout: float | None = None,
        token_exchange: TokenExchange | None = None,
        clock: Callable[[], float] = time.time,
    ):
        """
        Inicializa o provider, resolvendo as credenciais imediatamente.

        Args:
            credentials: Token de acesso ou par chave privada + e-mail de conta de serviço.
            session (requests.Session | None): Sessão HTTP. Uma nova é criada se omitida.
            timeout (float | None): Timeout em segundos aplicado a cada requisição.
            token_exchange (TokenExchange | None): Função que troca a credencial de conta
                de serviço por (token, expiração). Padrão: troca OAuth2 via google-auth.
            clock (Callable[[], float]): Relógio usado para validar o cache do token.

        Raises:
            AuthError: Se as credenciais estiverem ausentes ou forem ambíguas.
        """
        credential = resolve_credentials(credentials)
        self.session = session or requests.Session()
        self.timeout = timeout
        if token_exchange is None:
            token_exchange = partial(exchange_service_account_token, session=self.session)
        self.token_manager = TokenManager(credential, exchange=token_exchange, clock=clock)

    def get_access_token(self) -> str:
        return self.token_manager.get_access_token()

    def _is_sheet_empty(self, token: str, spreadsheet_id: str, sheet_name: str) -> bool:
        values = operations.get_values(
            self.session, token, spreadsheet_id, sheet_name, timeout=self.timeout
        )
        return len(values) == 0

    def add_rows(self, options: AddRowsOptions, rows: list[SheetRow]) -> None:
        """
        Acrescenta registros ao final da aba.

        Com header_map, os campos são renomeados para os rótulos das colunas e, se a
        aba estiver vazia, uma linha de cabeçalho com esses rótulos é escrita antes
        dos dados. A verificação de aba vazia e a escrita são chamadas separadas:
        outro escritor entre as duas pode resultar em cabeçalho duplicado.

        Args:
            options (AddRowsOptions): Planilha, aba e mapeamento de cabeçalho opcional.
            rows (list[SheetRow]): Registros com o mesmo esquema e ordem de chaves.
        """
        token = self.get_access_token()
        header_map = options.header_map

        values: Grid = []
        if header_map:
            if self._is_sheet_empty(token, options.spreadsheet_id, options.sheet_name):
                logger.debug("Aba '%s' vazia, incluindo linha de cabeçalho.", options.sheet_name)
                values.append(header_row(header_map))
            rows = [map_headers(row, header_map) for row in rows]

        values.extend(rows_to_grid(rows))

        operations.append_values(
            self.session,
            token,
            options.spreadsheet_id,
            options.sheet_name,
            values,
            timeout=self.timeout,
        )
        logger.info("%d registro(s) adicionado(s) à aba '%s'.", len(rows), options.sheet_name)

    def update_cells(self, options: UpdateCellsOptions) -> None:
        token = self.get_access_token()
        operations.update_values(
            self.session,
            token,
            options.spreadsheet_id,
            options.range or options.sheet_name,
            options.values,
            timeout=self.timeout,
        )
        logger.info("Intervalo '%s' atualizado.", options.range or options.sheet_name)

    def read_data(self, options: ReadDataOptions) -> list[SheetRow]:
        """
        Lê um intervalo e devolve um registro por linha de dados.

        A primeira linha lida é tratada como cabeçalho, literalmente: nenhum
        header_map é aplicado na leitura.
        """
        token = self.get_access_token()
        values = operations.get_values(
            self.session,
            token,
            options.spreadsheet_id,
            options.range or options.sheet_name,
            timeout=self.timeout,
        )
        return grid_to_rows(values)

    def delete_rows(self, options: DeleteRowsOptions) -> None:
        if not options.row_indexes:
            logger.debug("Nenhuma linha para remover da aba '%s'.", options.sheet_name)
            return

        token = self.get_access_token()
        worksheet.delete_rows(
            self.session,
            token,
            options.spreadsheet_id,
            options.sheet_name,
            list(options.row_indexes),
            timeout=self.timeout,
        )

    def create_sheet(self, options: CreateSheetOptions) -> None:
        token = self.get_access_token()
        worksheet.create_sheet(
            self.session,
            token,
            options.spreadsheet_id,
            options.sheet_name,
            timeout=self.timeout,
        )

    @staticmethod
    def map_headers(row: SheetRow, header_map: HeaderMap | None = None) -> SheetRow:
        return map_headers(row, header_map)
