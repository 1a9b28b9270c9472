import logging
import threading
import time
from collections.abc import Callable
from datetime import timezone

import requests
from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2 import service_account

from ..credentials import Credential, ServiceAccountCredential, TokenCredential
from ..exceptions import AuthError
from ..types import CachedToken

logger = logging.getLogger(__name__)

SCOPES = [
    'https://www.googleapis.com/auth/spreadsheets',
]

# Validade assumida quando a troca não informa expiração
DEFAULT_TOKEN_LIFETIME_SECONDS = 50 * 60
SAFETY_MARGIN_SECONDS = 60

TokenExchange = Callable[[ServiceAccountCredential], tuple[str, float | None]]


def exchange_service_account_token(
    credential: ServiceAccountCredential,
    session: requests.Session | None = None,
) -> tuple[str, float | None]:
    """
    Troca o par chave privada + e-mail da conta de serviço por um token de acesso.

    Args:
        credential (ServiceAccountCredential): Credencial da conta de serviço.
        session (requests.Session | None): Sessão HTTP usada na troca.

    Returns:
        tuple[str, float | None]: O token e sua expiração (timestamp Unix), se informada.
    """
    logger.debug("Obtendo token de acesso para a conta de serviço: %s", credential.client_email)
    info = {
        "type": "service_account",
        "private_key": credential.private_key,
        "client_email": credential.client_email,
        "token_uri": credential.token_uri,
    }
    try:
        credentials = service_account.Credentials.from_service_account_info(info, scopes=SCOPES)
        credentials.refresh(Request(session))
    except (GoogleAuthError, ValueError) as e:
        logger.error(
            "Falha na troca de token para a conta de serviço %s: %s",
            credential.client_email,
            e,
        )
        raise AuthError(f"service account token exchange failed: {e}") from e

    expiry = None
    if credentials.expiry is not None:
        # google-auth reporta expiração como datetime UTC sem fuso
        expiry = credentials.expiry.replace(tzinfo=timezone.utc).timestamp()

    logger.info("Token de acesso obtido para a conta de serviço: %s", credential.client_email)
    return credentials.token, expiry


class TokenManager:
    """
    Obtém e mantém em cache o token bearer de um provider.

    Tokens fornecidos pelo chamador são devolvidos como estão. Tokens gerados a
    partir de conta de serviço ficam em cache até SAFETY_MARGIN_SECONDS antes de
    expirarem. A renovação é serializada por instância: chamadas concorrentes
    que encontram o cache vencido resultam em uma única troca.
    """

    def __init__(
        self,
        credential: Credential,
        exchange: TokenExchange = exchange_service_account_token,
        clock: Callable[[], float] = time.time,
        safety_margin: float = SAFETY_MARGIN_SECONDS,
    ):
        self.credential = credential
        self._exchange = exchange
        self._clock = clock
        self._safety_margin = safety_margin
        self._cached: CachedToken | None = None
        self._lock = threading.Lock()

    @property
    def cached_token(self) -> CachedToken | None:
        return self._cached

    def _is_fresh(self, cached: CachedToken | None) -> bool:
        return cached is not None and self._clock() < cached.expiry - self._safety_margin

    def get_access_token(self) -> str:
        """
        Retorna um token de acesso válido.

        Returns:
            str: Token bearer.

        Raises:
            AuthError: Se a credencial não for utilizável ou a troca falhar.
        """
        if isinstance(self.credential, TokenCredential):
            return self.credential.token

        if not isinstance(self.credential, ServiceAccountCredential):
            raise AuthError("no valid access token or service account credentials provided")

        with self._lock:
            if self._is_fresh(self._cached):
                return self._cached.token

            logger.debug("Token ausente ou próximo da expiração, renovando.")
            token, expiry = self._exchange(self.credential)
            if expiry is None:
                expiry = self._clock() + DEFAULT_TOKEN_LIFETIME_SECONDS

            self._cached = CachedToken(token=token, expiry=expiry)
            return token

    def invalidate(self) -> None:
        """Descarta o token em cache, forçando uma nova troca na próxima chamada."""
        with self._lock:
            self._cached = None
