import logging

import requests

from ..types import Grid
from .connection import build_url, quote_segment, send

logger = logging.getLogger(__name__)

USER_ENTERED = "USER_ENTERED"


def get_values(
        session: requests.Session,
        token: str,
        spreadsheet_id: str,
        range_name: str,
        timeout: float | None = None,
) -> Grid:
    """
    Lê os valores de um intervalo, linha a linha.

    Args:
        session (requests.Session): Sessão HTTP.
        token (str): Token bearer.
        spreadsheet_id (str): ID da planilha.
        range_name (str): Nome da aba ou intervalo A1.
        timeout (float | None): Timeout em segundos.

    Returns:
        Grid: Valores lidos. Lista vazia se o intervalo não tiver dados.
    """
    logger.debug("Lendo valores de '%s' na planilha %s", range_name, spreadsheet_id)
    url = build_url(
        f"{quote_segment(spreadsheet_id)}/values/{quote_segment(range_name)}",
        {"majorDimension": "ROWS"},
    )
    data = send(session, "GET", url, token, timeout=timeout)
    return data.get("values") or []


def append_values(
        session: requests.Session,
        token: str,
        spreadsheet_id: str,
        range_name: str,
        values: Grid,
        timeout: float | None = None,
) -> None:
    """
    Acrescenta linhas após o conteúdo existente da aba.

    Os valores são interpretados como se digitados pelo usuário (fórmulas, datas).

    Args:
        session (requests.Session): Sessão HTTP.
        token (str): Token bearer.
        spreadsheet_id (str): ID da planilha.
        range_name (str): Nome da aba ou intervalo A1 usado para detectar a tabela.
        values (Grid): Linhas a acrescentar.
        timeout (float | None): Timeout em segundos.
    """
    logger.debug("Acrescentando %d linha(s) em '%s'", len(values), range_name)
    url = build_url(
        f"{quote_segment(spreadsheet_id)}/values/{quote_segment(range_name)}:append",
        {"valueInputOption": USER_ENTERED},
    )
    send(session, "POST", url, token, json={"values": values}, timeout=timeout)


def update_values(
        session: requests.Session,
        token: str,
        spreadsheet_id: str,
        range_name: str,
        values: Grid,
        timeout: float | None = None,
) -> None:
    """
    Sobrescreve um intervalo com a grade informada.

    Args:
        session (requests.Session): Sessão HTTP.
        token (str): Token bearer.
        spreadsheet_id (str): ID da planilha.
        range_name (str): Nome da aba ou intervalo A1.
        values (Grid): Grade a escrever, com o mesmo formato do intervalo.
        timeout (float | None): Timeout em segundos.
    """
    logger.debug("Atualizando intervalo '%s' com %d linha(s)", range_name, len(values))
    url = build_url(
        f"{quote_segment(spreadsheet_id)}/values/{quote_segment(range_name)}",
        {"valueInputOption": USER_ENTERED},
    )
    send(session, "PUT", url, token, json={"values": values}, timeout=timeout)
