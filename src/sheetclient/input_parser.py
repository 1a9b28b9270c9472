from collections.abc import Mapping
from typing import Any

from .exceptions import UnsupportedInputError
from .types import SheetRow


def parse_input(data: Any) -> list[SheetRow]:
    """
    Normaliza a entrada de escrita para uma lista de registros.

    Args:
        data (Any): Lista/tupla de registros ou um único registro (mapping).

    Returns:
        list[SheetRow]: Lista de registros.

    Raises:
        UnsupportedInputError: Se a entrada não for nem lista nem mapping.
    """
    if isinstance(data, (list, tuple)):
        return list(data)
    if isinstance(data, Mapping):
        return [data]
    raise UnsupportedInputError("Unsupported input format")
