"""
Tipos de dados compartilhados.

Define o formato das linhas (registros chaveados), da grade 2D enviada à API
e das opções de cada operação.
"""
from dataclasses import dataclass

CellValue = str | int | float | bool | None

# Ordem de inserção das chaves = ordem das colunas
SheetRow = dict[str, CellValue]
Grid = list[list[CellValue]]
HeaderMap = dict[str, str]


@dataclass(frozen=True)
class SheetOptions:
    """
    Identificação da planilha e da aba alvo de uma operação.

    Attributes:
        spreadsheet_id (str): ID da planilha.
        sheet_name (str): Nome da aba.
    """
    spreadsheet_id: str
    sheet_name: str


@dataclass(frozen=True)
class AddRowsOptions(SheetOptions):
    """
    Opções de add_rows.

    Attributes:
        header_map (HeaderMap | None): Mapeamento {campo_de_entrada: rótulo_da_coluna}.
    """
    header_map: HeaderMap | None = None


@dataclass(frozen=True)
class UpdateCellsOptions(SheetOptions):
    """
    Opções de update_cells.

    Attributes:
        values (Grid): Valores a escrever, já no formato de grade.
        range (str | None): Intervalo A1 (ex: "Sheet1!A2:B3"). Usa sheet_name se omitido.
    """
    values: Grid
    range: str | None = None


@dataclass(frozen=True)
class ReadDataOptions(SheetOptions):
    """
    Opções de read_data.

    Attributes:
        range (str | None): Intervalo A1. Usa sheet_name se omitido.
    """
    range: str | None = None


@dataclass(frozen=True)
class DeleteRowsOptions(SheetOptions):
    """
    Opções de delete_rows.

    Attributes:
        row_indexes (list[int]): Números das linhas a remover (1-based, como na planilha).
    """
    row_indexes: list[int]


@dataclass(frozen=True)
class CreateSheetOptions(SheetOptions):
    """Opções de create_sheet. sheet_name é o nome da nova aba."""


@dataclass(frozen=True)
class CachedToken:
    """Token de acesso em cache e seu instante de expiração (timestamp Unix)."""
    token: str
    expiry: float
