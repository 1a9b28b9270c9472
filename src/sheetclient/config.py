from dataclasses import dataclass
import os
from typing import Any

from dotenv import load_dotenv

from .exceptions import ConfigError

# Carrega as variáveis de ambiente do arquivo .env
load_dotenv()

DEFAULT_PROVIDER = "google"


def _credentials_from_env() -> dict[str, str] | None:
    access_token = os.getenv('GOOGLE_ACCESS_TOKEN')
    if access_token:
        return {"access_token": access_token}

    private_key = os.getenv('GOOGLE_PRIVATE_KEY')
    client_email = os.getenv('GOOGLE_CLIENT_EMAIL')
    if private_key and client_email:
        return {"private_key": private_key, "client_email": client_email}

    return None


@dataclass(frozen=True)
class Config:
    """
    Configurações do SheetClient, obtidas de variáveis de ambiente quando não informadas.

    Attributes:
        provider (str | None): Nome do provider, obtido da variável de ambiente SHEET_PROVIDER.
            Padrão: "google".
        credentials (Any): Credenciais do provider. Se omitidas, montadas a partir de
            GOOGLE_ACCESS_TOKEN ou de GOOGLE_PRIVATE_KEY + GOOGLE_CLIENT_EMAIL.
        service_account_file (str | None): Caminho para o arquivo de conta de serviço, obtido
            da variável de ambiente GOOGLE_SERVICE_ACCOUNT_FILE. Usado quando não há credentials.
        timeout (float | None): Timeout em segundos de cada requisição, obtido da variável de
            ambiente SHEET_TIMEOUT. Padrão: sem timeout.
    """
    provider: str | None = None
    credentials: Any = None
    service_account_file: str | None = None
    timeout: float | None = None

    def __post_init__(self):
        if self.provider is None:
            object.__setattr__(self, 'provider', os.getenv('SHEET_PROVIDER') or DEFAULT_PROVIDER)
        if self.credentials is None:
            object.__setattr__(self, 'credentials', _credentials_from_env())
        if self.service_account_file is None:
            object.__setattr__(self, 'service_account_file', os.getenv('GOOGLE_SERVICE_ACCOUNT_FILE'))
        if self.timeout is None and os.getenv('SHEET_TIMEOUT'):
            try:
                object.__setattr__(self, 'timeout', float(os.environ['SHEET_TIMEOUT']))
            except ValueError as e:
                raise ConfigError("A variável de ambiente 'SHEET_TIMEOUT' deve ser numérica.") from e

        if not self.provider:
            raise ConfigError("O nome do provider não pode ser vazio.")
