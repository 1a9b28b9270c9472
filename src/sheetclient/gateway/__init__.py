"""
Gateway para a API REST do Google Sheets.

Este módulo encapsula as chamadas HTTP à API de valores e às alterações
estruturais, além da autenticação e da conversão registro/grade.

Módulos:
    - connection: Montagem de URLs e envio de requisições autenticadas
    - token: Obtenção e cache do token de acesso
    - mapping: Conversão entre registros e grades
    - operations: Leitura e escrita de valores
    - worksheet: Gerenciamento de abas e remoção de linhas
"""

from .connection import BASE_URL, build_url, quote_segment, send
from .mapping import grid_to_rows, header_row, map_headers, rows_to_grid
from .operations import append_values, get_values, update_values
from .token import TokenManager, exchange_service_account_token
from .worksheet import batch_update, create_sheet, delete_rows, get_sheet_id, get_sheet_ids

__all__ = [
    "BASE_URL",
    "build_url",
    "quote_segment",
    "send",
    "TokenManager",
    "exchange_service_account_token",
    "map_headers",
    "header_row",
    "rows_to_grid",
    "grid_to_rows",
    "get_values",
    "append_values",
    "update_values",
    "get_sheet_ids",
    "get_sheet_id",
    "batch_update",
    "delete_rows",
    "create_sheet",
]
