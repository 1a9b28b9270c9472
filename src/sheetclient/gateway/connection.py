import logging
from typing import Any
from urllib.parse import quote, urlencode

import requests

from ..exceptions import SheetApiError

logger = logging.getLogger(__name__)

BASE_URL = 'https://sheets.googleapis.com/v4/spreadsheets'


def quote_segment(segment: str) -> str:
    """Codifica um segmento de caminho (nome de aba, intervalo A1) para a URL."""
    return quote(segment, safe="")


def build_url(path: str, params: dict[str, str | None] | None = None) -> str:
    """
    Monta a URL completa de uma chamada à API.

    Args:
        path (str): Caminho relativo a BASE_URL, com segmentos já codificados.
        params (dict[str, str | None] | None): Parâmetros de query. Valores None são descartados.

    Returns:
        str: URL absoluta.
    """
    url = f"{BASE_URL}/{path}"
    if params:
        query = urlencode({key: value for key, value in params.items() if value is not None})
        if query:
            url += f"?{query}"
    return url


def send(
    session: requests.Session,
    method: str,
    url: str,
    token: str,
    json: Any = None,
    timeout: float | None = None,
) -> dict[str, Any]:
    """
    Executa uma requisição autenticada contra a API de planilhas.

    Não há retry: falhas de transporte do requests são propagadas como estão.

    Args:
        session (requests.Session): Sessão HTTP.
        method (str): Método HTTP.
        url (str): URL absoluta, normalmente vinda de build_url.
        token (str): Token bearer.
        json (Any): Corpo da requisição, serializado como JSON se fornecido.
        timeout (float | None): Timeout em segundos repassado ao requests.

    Returns:
        dict[str, Any]: Corpo JSON da resposta, ou {} se vazio.

    Raises:
        SheetApiError: Se o status da resposta não for 2xx.
    """
    headers = {"Authorization": f"Bearer {token}"}
    if json is not None:
        headers["Content-Type"] = "application/json"

    logger.debug("%s %s", method, url)
    response = session.request(method, url, headers=headers, json=json, timeout=timeout)

    if not 200 <= response.status_code < 300:
        logger.error(
            "Erro da API do Google Sheets em %s %s: %d %s",
            method,
            url,
            response.status_code,
            response.text,
        )
        raise SheetApiError(response.status_code, response.text)

    if not response.content:
        return {}
    return response.json()
