"""
Exceções do sheetclient.

Todas herdam de SheetClientError, permitindo capturar qualquer falha da
biblioteca com um único except.
"""


class SheetClientError(Exception):
    """Erro base da biblioteca."""


class ConfigError(SheetClientError, ValueError):
    """Configuração inválida (ex: provider desconhecido)."""


class AuthError(SheetClientError):
    """Nenhuma credencial utilizável ou falha na troca de token."""


class SheetApiError(SheetClientError):
    """
    Resposta HTTP não-2xx da API de planilhas.

    Attributes:
        status (int): Código de status HTTP retornado.
        body (str): Corpo da resposta, sem interpretação.
    """

    def __init__(self, status: int, body: str):
        self.status = status
        self.body = body
        super().__init__(f"Google Sheets API error: {status} {body}")


class UnsupportedInputError(SheetClientError, TypeError):
    """Entrada que não é nem lista nem objeto (mapping)."""


class SheetNotFoundError(SheetClientError, LookupError):
    """Aba não encontrada na planilha."""


class SheetExistsError(SheetClientError):
    """Já existe uma aba com o nome informado."""
