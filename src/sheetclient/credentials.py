"""
Credenciais aceitas pelos providers.

Uma credencial é exatamente uma de duas formas:

- TokenCredential: token bearer já obtido pelo chamador.
- ServiceAccountCredential: par chave privada + e-mail de uma conta de serviço,
  a partir do qual o token é gerado.

A forma é resolvida uma única vez, na construção do provider.
"""
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .exceptions import AuthError

logger = logging.getLogger(__name__)

GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"

_TOKEN_KEYS = ("access_token", "accessToken", "token")


@dataclass(frozen=True)
class TokenCredential:
    token: str

    def __repr__(self) -> str:
        return "TokenCredential(token='***')"


@dataclass(frozen=True)
class ServiceAccountCredential:
    private_key: str
    client_email: str
    token_uri: str = GOOGLE_TOKEN_URI

    def __repr__(self) -> str:
        return f"ServiceAccountCredential(client_email={self.client_email!r})"


Credential = TokenCredential | ServiceAccountCredential


def _normalize_private_key(private_key: str) -> str:
    # Chaves vindas de variáveis de ambiente costumam ter "\n" literais
    return private_key.replace("\\n", "\n")


def resolve_credentials(raw: Credential | Mapping[str, Any] | None) -> Credential:
    """
    Converte um conjunto de credenciais em uma das variantes suportadas.

    Args:
        raw: Instância de TokenCredential/ServiceAccountCredential ou um mapping
            com 'access_token' (ou 'accessToken'/'token'), ou com
            'private_key' + 'client_email'.

    Returns:
        Credential: A credencial resolvida.

    Raises:
        AuthError: Se nenhuma forma válida estiver presente, ou se ambas estiverem.
    """
    if isinstance(raw, (TokenCredential, ServiceAccountCredential)):
        return raw

    if not raw or not isinstance(raw, Mapping):
        raise AuthError("no valid access token or service account credentials provided")

    token = next((raw[key] for key in _TOKEN_KEYS if raw.get(key)), None)
    private_key = raw.get("private_key")
    client_email = raw.get("client_email")
    has_service_account = bool(private_key and client_email)

    if token and has_service_account:
        raise AuthError(
            "ambiguous credentials: provide either an access token or service account "
            "credentials, not both"
        )

    if token:
        logger.debug("Credencial resolvida: token de acesso fornecido pelo chamador.")
        return TokenCredential(token=token)

    if has_service_account:
        logger.debug("Credencial resolvida: conta de serviço %s.", client_email)
        return ServiceAccountCredential(
            private_key=_normalize_private_key(private_key),
            client_email=client_email,
            token_uri=raw.get("token_uri") or GOOGLE_TOKEN_URI,
        )

    raise AuthError("no valid access token or service account credentials provided")


def load_service_account_file(path: str) -> ServiceAccountCredential:
    """
    Lê um arquivo JSON de chave de conta de serviço do Google.

    Args:
        path (str): Caminho para o arquivo JSON.

    Returns:
        ServiceAccountCredential: Credencial extraída do arquivo.
    """
    logger.debug("Carregando conta de serviço a partir de: %s", path)
    try:
        with open(path, encoding="utf-8") as handle:
            info = json.load(handle)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Não foi possível ler o arquivo de conta de serviço '%s': %s", path, e)
        raise AuthError(f"could not read service account file '{path}': {e}") from e

    credential = resolve_credentials(info)
    if not isinstance(credential, ServiceAccountCredential):
        raise AuthError(f"'{path}' is not a service account key file")
    return credential
