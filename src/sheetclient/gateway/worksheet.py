import logging
from typing import Any

import requests

from ..exceptions import SheetExistsError, SheetNotFoundError
from .connection import build_url, quote_segment, send

logger = logging.getLogger(__name__)


def get_sheet_ids(
        session: requests.Session,
        token: str,
        spreadsheet_id: str,
        timeout: float | None = None,
) -> dict[str, int]:
    """
    Obtém um mapeamento das abas de uma planilha, associando títulos aos seus sheetId.

    Args:
        session (requests.Session): Sessão HTTP.
        token (str): Token bearer.
        spreadsheet_id (str): ID da planilha.
        timeout (float | None): Timeout em segundos.

    Returns:
        dict[str, int]: Dicionário mapeando títulos de abas para seus sheetId numéricos.
    """
    logger.debug("Obtendo as abas da planilha %s", spreadsheet_id)
    url = build_url(
        quote_segment(spreadsheet_id),
        {"fields": "sheets.properties(sheetId,title)"},
    )
    data = send(session, "GET", url, token, timeout=timeout)

    mapping: dict[str, int] = {}
    for sheet in data.get("sheets", []):
        properties = sheet.get("properties", {})
        mapping[properties["title"]] = properties.get("sheetId", 0)

    logger.debug("Abas da planilha %s: %s", spreadsheet_id, mapping)
    return mapping


def get_sheet_id(
        session: requests.Session,
        token: str,
        spreadsheet_id: str,
        sheet_name: str,
        timeout: float | None = None,
) -> int:
    """
    Obtém o sheetId numérico de uma aba pelo título.

    Raises:
        SheetNotFoundError: Se a aba não existir.
    """
    sheet_ids = get_sheet_ids(session, token, spreadsheet_id, timeout=timeout)
    if sheet_name not in sheet_ids:
        logger.error("Aba '%s' não encontrada na planilha %s.", sheet_name, spreadsheet_id)
        raise SheetNotFoundError(
            f"sheet '{sheet_name}' not found in spreadsheet '{spreadsheet_id}'"
        )
    return sheet_ids[sheet_name]


def batch_update(
        session: requests.Session,
        token: str,
        spreadsheet_id: str,
        requests_list: list[dict[str, Any]],
        timeout: float | None = None,
) -> dict[str, Any]:
    """
    Envia alterações estruturais (abas, dimensões) em uma única chamada batchUpdate.

    Args:
        session (requests.Session): Sessão HTTP.
        token (str): Token bearer.
        spreadsheet_id (str): ID da planilha.
        requests_list (list[dict[str, Any]]): Requisições no formato da API.
        timeout (float | None): Timeout em segundos.

    Returns:
        dict[str, Any]: Resposta da API.
    """
    logger.debug(
        "Enviando batchUpdate com %d requisição(ões) para a planilha %s",
        len(requests_list),
        spreadsheet_id,
    )
    url = build_url(f"{quote_segment(spreadsheet_id)}:batchUpdate")
    return send(session, "POST", url, token, json={"requests": requests_list}, timeout=timeout)


def delete_rows(
        session: requests.Session,
        token: str,
        spreadsheet_id: str,
        sheet_name: str,
        row_numbers: list[int],
        timeout: float | None = None,
) -> None:
    """
    Remove linhas de uma aba pelo número (1-based).

    As linhas são removidas da maior para a menor, para que a remoção de uma não
    desloque o índice das seguintes.

    Args:
        session (requests.Session): Sessão HTTP.
        token (str): Token bearer.
        spreadsheet_id (str): ID da planilha.
        sheet_name (str): Nome da aba.
        row_numbers (list[int]): Números das linhas a remover.
        timeout (float | None): Timeout em segundos.
    """
    invalid = [number for number in row_numbers if number < 1]
    if invalid:
        raise ValueError(f"Números de linha inválidos (devem ser >= 1): {invalid}")

    sheet_id = get_sheet_id(session, token, spreadsheet_id, sheet_name, timeout=timeout)

    requests_list = [
        {
            "deleteDimension": {
                "range": {
                    "sheetId": sheet_id,
                    "dimension": "ROWS",
                    "startIndex": number - 1,
                    "endIndex": number,
                }
            }
        }
        for number in sorted(set(row_numbers), reverse=True)
    ]
    batch_update(session, token, spreadsheet_id, requests_list, timeout=timeout)
    logger.info("%d linha(s) removida(s) da aba '%s'.", len(requests_list), sheet_name)


def create_sheet(
        session: requests.Session,
        token: str,
        spreadsheet_id: str,
        sheet_name: str,
        timeout: float | None = None,
) -> int | None:
    """
    Cria uma nova aba na planilha.

    Args:
        session (requests.Session): Sessão HTTP.
        token (str): Token bearer.
        spreadsheet_id (str): ID da planilha.
        sheet_name (str): Nome da nova aba.
        timeout (float | None): Timeout em segundos.

    Returns:
        int | None: sheetId da aba criada, se informado pela API.

    Raises:
        SheetExistsError: Se já existir uma aba com esse nome.
    """
    logger.debug("Criando a aba '%s' na planilha %s.", sheet_name, spreadsheet_id)
    if sheet_name in get_sheet_ids(session, token, spreadsheet_id, timeout=timeout):
        logger.error("Aba '%s' já existe na planilha %s.", sheet_name, spreadsheet_id)
        raise SheetExistsError(f"sheet '{sheet_name}' already exists in spreadsheet '{spreadsheet_id}'")

    response = batch_update(
        session,
        token,
        spreadsheet_id,
        [{"addSheet": {"properties": {"title": sheet_name}}}],
        timeout=timeout,
    )
    replies = response.get("replies") or [{}]
    sheet_id = replies[0].get("addSheet", {}).get("properties", {}).get("sheetId")
    logger.info("Aba criada com sucesso: %s", sheet_name)
    return sheet_id
