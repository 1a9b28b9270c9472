"""
sheetclient

Camada fina para operações de linha (adicionar, atualizar, ler, remover) e
criação de abas em planilhas, independente do backend utilizado.

Este módulo expõe as principais classes para uso externo:

- Config: Configuração do cliente
- SheetClient: Fachada que seleciona o provider e repassa as operações
- GoogleSheetProvider: Provider para a API REST do Google Sheets
"""

from .__version__ import __version__
from .client import SheetClient, available_providers, register_provider
from .config import Config
from .credentials import ServiceAccountCredential, TokenCredential
from .exceptions import (
    AuthError,
    ConfigError,
    SheetApiError,
    SheetClientError,
    SheetExistsError,
    SheetNotFoundError,
    UnsupportedInputError,
)
from .input_parser import parse_input
from .providers import BaseSheetProvider, GoogleSheetProvider
from .types import (
    AddRowsOptions,
    CreateSheetOptions,
    DeleteRowsOptions,
    ReadDataOptions,
    UpdateCellsOptions,
)

__all__ = [
    '__version__',
    'Config',
    'SheetClient',
    'register_provider',
    'available_providers',
    'BaseSheetProvider',
    'GoogleSheetProvider',
    'TokenCredential',
    'ServiceAccountCredential',
    'AddRowsOptions',
    'UpdateCellsOptions',
    'ReadDataOptions',
    'DeleteRowsOptions',
    'CreateSheetOptions',
    'parse_input',
    'SheetClientError',
    'ConfigError',
    'AuthError',
    'SheetApiError',
    'UnsupportedInputError',
    'SheetNotFoundError',
    'SheetExistsError',
]
