from abc import ABC, abstractmethod

from ..types import (
    AddRowsOptions,
    CreateSheetOptions,
    DeleteRowsOptions,
    ReadDataOptions,
    SheetRow,
    UpdateCellsOptions,
)


class BaseSheetProvider(ABC):
    """
    Contrato comum a todos os backends de planilha.

    Cada provider traduz as cinco operações lógicas para chamadas do seu backend.
    """

    @abstractmethod
    def add_rows(self, options: AddRowsOptions, rows: list[SheetRow]) -> None:
        """Acrescenta registros ao final da aba."""

    @abstractmethod
    def update_cells(self, options: UpdateCellsOptions) -> None:
        """Sobrescreve um intervalo com uma grade de valores."""

    @abstractmethod
    def read_data(self, options: ReadDataOptions) -> list[SheetRow]:
        """Lê um intervalo, usando a primeira linha como cabeçalho."""

    @abstractmethod
    def delete_rows(self, options: DeleteRowsOptions) -> None:
        """Remove linhas pelo número."""

    @abstractmethod
    def create_sheet(self, options: CreateSheetOptions) -> None:
        """Cria uma nova aba."""
