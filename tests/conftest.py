"""Configuração do pytest para o serviço de calendário escolar."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _reset_bootstrap_singletons():
    """Cada teste começa com cache por ano e settings recém-criados."""
    from app.bootstrap import reset_dependencies

    reset_dependencies()
    yield
    reset_dependencies()
