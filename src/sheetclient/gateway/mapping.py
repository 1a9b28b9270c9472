"""
Conversões entre registros chaveados (SheetRow) e grades 2D (Grid).

Funções puras, sem estado. A posição na grade vem da ordem das chaves de cada
registro, então todos os registros convertidos juntos devem compartilhar o
mesmo esquema e a mesma ordem de chaves.
"""
from ..types import Grid, HeaderMap, SheetRow


def map_headers(row: SheetRow, header_map: HeaderMap | None = None) -> SheetRow:
    """
    Renomeia as chaves de um registro segundo header_map.

    Chaves ausentes do mapeamento são mantidas. A posição de cada chave é preservada.

    Args:
        row (SheetRow): Registro de entrada.
        header_map (HeaderMap | None): Mapeamento {campo: rótulo_da_coluna}.

    Returns:
        SheetRow: O próprio registro se não houver mapeamento, ou um novo registro renomeado.
    """
    if not header_map:
        return row
    return {header_map.get(key) or key: value for key, value in row.items()}


def header_row(header_map: HeaderMap) -> list[str]:
    """Linha de cabeçalho com os rótulos do mapeamento, na ordem de iteração."""
    return list(header_map.values())


def rows_to_grid(rows: list[SheetRow]) -> Grid:
    return [list(row.values()) for row in rows]


def grid_to_rows(grid: Grid) -> list[SheetRow]:
    """
    Converte uma grade em registros, usando a primeira linha como cabeçalho.

    Células são associadas por posição: uma linha mais curta que o cabeçalho gera
    um registro sem as chaves finais, e células além do cabeçalho são ignoradas.

    Args:
        grid (Grid): Grade lida da planilha.

    Returns:
        list[SheetRow]: Um registro por linha de dados. Vazio se não houver linhas de dados.
    """
    if len(grid) < 2:
        return []
    header = grid[0]
    return [dict(zip(header, row)) for row in grid[1:]]
