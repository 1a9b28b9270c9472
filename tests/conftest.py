"""Configuração de testes pytest."""
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Adicionar src ao path para importação dos módulos
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


def _make_response(status_code=200, payload=None, text=""):
    """Cria uma resposta HTTP falsa no formato de requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.text = text
    response.content = b"{}" if payload is not None else b""
    response.json.return_value = payload
    return response


@pytest.fixture
def session():
    """Sessão HTTP falsa; configure session.request.side_effect por teste."""
    return Mock()


@pytest.fixture
def make_response():
    """Fábrica de respostas HTTP falsas."""
    return _make_response
