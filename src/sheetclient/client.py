import logging
from collections.abc import Callable

from .config import Config
from .credentials import load_service_account_file
from .exceptions import ConfigError
from .gateway.mapping import map_headers
from .input_parser import parse_input
from .providers import BaseSheetProvider, GoogleSheetProvider
from .types import (
    AddRowsOptions,
    CreateSheetOptions,
    DeleteRowsOptions,
    HeaderMap,
    ReadDataOptions,
    SheetRow,
    UpdateCellsOptions,
)

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[Config], BaseSheetProvider]

_registry: dict[str, ProviderFactory] = {}


def register_provider(name: str, factory: ProviderFactory) -> None:
    """
    Registra uma fábrica de provider sob um nome (sem distinção de maiúsculas).

    Args:
        name (str): Nome usado em Config.provider.
        factory (ProviderFactory): Função que recebe a Config e devolve o provider.
    """
    _registry[name.lower()] = factory
    logger.debug("Provider registrado: %s", name)


def available_providers() -> list[str]:
    return sorted(_registry)


def _google_factory(config: Config) -> BaseSheetProvider:
    credentials = config.credentials
    if not credentials and config.service_account_file:
        credentials = load_service_account_file(config.service_account_file)
    return GoogleSheetProvider(credentials, timeout=config.timeout)


register_provider("google", _google_factory)


class SheetClient:
    """
    Fachada que escolhe o provider pela configuração e repassa cada operação.

    Falhas do provider são propagadas sem alteração.
    """

    def __init__(self, config: Config | None = None):
        """
        Inicializa o cliente e o provider configurado.

        Raises:
            ConfigError: Se o provider não estiver registrado.
            AuthError: Se as credenciais do provider forem inválidas.
        """
        self.config: Config = config or Config()

        factory = _registry.get(self.config.provider.lower())
        if factory is None:
            logger.error(
                "Provider '%s' não suportado. Disponíveis: %s",
                self.config.provider,
                available_providers(),
            )
            raise ConfigError(f"provider not supported: {self.config.provider}")

        self.provider: BaseSheetProvider = factory(self.config)
        logger.info("SheetClient inicializado com o provider '%s'.", self.config.provider)

    def add_rows(self, options: AddRowsOptions, rows: list[SheetRow] | SheetRow) -> None:
        return self.provider.add_rows(options, parse_input(rows))

    def update_cells(self, options: UpdateCellsOptions) -> None:
        return self.provider.update_cells(options)

    def read_data(self, options: ReadDataOptions) -> list[SheetRow]:
        return self.provider.read_data(options)

    def delete_rows(self, options: DeleteRowsOptions) -> None:
        return self.provider.delete_rows(options)

    def create_sheet(self, options: CreateSheetOptions) -> None:
        return self.provider.create_sheet(options)

    @staticmethod
    def map_headers(row: SheetRow, header_map: HeaderMap | None = None) -> SheetRow:
        return map_headers(row, header_map)
