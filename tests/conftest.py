import mongomock
import pytest


@pytest.fixture(autouse=True)
def mongo_db(monkeypatch):
    """Troca o MongoDB real por um banco mongomock em memória."""
    db = mongomock.MongoClient()['lembretes_test']
    monkeypatch.setattr('core.repositories.base_repository.get_database', lambda: db)
    return db


@pytest.fixture
def criar_lembrete(mongo_db):
    from lembretes.services.lembrete_service import LembreteService

    def _criar(texto='Pagar conta de luz', data='10/03/2025', **kwargs):
        return LembreteService().criar_lembrete(texto=texto, data=data, **kwargs)

    return _criar


@pytest.fixture
def criar_categoria(mongo_db):
    from lembretes.services.categoria_service import CategoriaService

    def _criar(nome='Trabalho', cor=None):
        return CategoriaService().create_categoria(nome=nome, cor=cor)

    return _criar
