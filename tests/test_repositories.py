from datetime import datetime

from lembretes.repositories.categoria_repository import CategoriaRepository
from lembretes.repositories.lembrete_repository import LembreteRepository
from core.repositories.base_repository import parse_id


def _lembrete(texto, data, **extra):
    return {'texto': texto, 'data': data, 'prioridade': 0, 'concluido': False,
            'categoria_id': None, **extra}


class TestParseId:
    def test_aceita_int_e_string_numerica(self):
        assert parse_id(3) == 3
        assert parse_id(" 7 ") == 7

    def test_rejeita_invalidos(self):
        assert parse_id("abc") is None
        assert parse_id(None) is None
        assert parse_id(True) is None


class TestBaseRepository:
    def test_ids_sequenciais_por_collection(self, mongo_db):
        lembretes = LembreteRepository()
        categorias = CategoriaRepository()

        assert lembretes.create(_lembrete('a', datetime(2025, 1, 1)))['_id'] == 1
        assert lembretes.create(_lembrete('b', datetime(2025, 1, 2)))['_id'] == 2
        assert categorias.create({'nome': 'Casa'})['_id'] == 1
        assert mongo_db['counters'].find_one({'_id': 'lembretes'})['seq'] == 2

    def test_create_preenche_timestamps(self):
        doc = LembreteRepository().create(_lembrete('a', datetime(2025, 1, 1)))
        assert doc['created_at'] is not None
        assert doc['updated_at'] is not None

    def test_find_by_id_aceita_string(self):
        repo = LembreteRepository()
        criado = repo.create(_lembrete('a', datetime(2025, 1, 1)))
        assert repo.find_by_id(str(criado['_id']))['texto'] == 'a'
        assert repo.find_by_id('xyz') is None
        assert repo.find_by_id(999) is None

    def test_update_retorna_documento_atualizado(self):
        repo = LembreteRepository()
        criado = repo.create(_lembrete('a', datetime(2025, 1, 1)))

        atualizado = repo.update(criado['_id'], {'texto': 'b'})
        assert atualizado['texto'] == 'b'
        assert repo.update(999, {'texto': 'c'}) is None

    def test_delete(self):
        repo = LembreteRepository()
        criado = repo.create(_lembrete('a', datetime(2025, 1, 1)))

        assert repo.delete(criado['_id']) is True
        assert repo.delete(criado['_id']) is False
        assert repo.count() == 0


class TestLembreteRepository:
    def test_find_all_ordena_por_data(self):
        repo = LembreteRepository()
        repo.create(_lembrete('depois', datetime(2025, 5, 1)))
        repo.create(_lembrete('antes', datetime(2025, 1, 1)))

        assert [l['texto'] for l in repo.find_all()] == ['antes', 'depois']

    def test_find_all_filtros(self):
        repo = LembreteRepository()
        repo.create(_lembrete('a', datetime(2025, 1, 1), concluido=True))
        repo.create(_lembrete('b', datetime(2025, 1, 2), prioridade=2))
        repo.create(_lembrete('c', datetime(2025, 1, 3), categoria_id=5))

        assert [l['texto'] for l in repo.find_all(concluido=True)] == ['a']
        assert [l['texto'] for l in repo.find_all(prioridade=2)] == ['b']
        assert [l['texto'] for l in repo.find_all(categoria_id=5)] == ['c']

    def test_find_textos_na_ordem_de_criacao(self):
        repo = LembreteRepository()
        repo.create(_lembrete('primeiro', datetime(2025, 5, 1)))
        repo.create(_lembrete('segundo', datetime(2025, 1, 1)))

        assert [l['texto'] for l in repo.find_textos()] == ['primeiro', 'segundo']

    def test_desvincular_categoria(self):
        repo = LembreteRepository()
        repo.create(_lembrete('a', datetime(2025, 1, 1), categoria_id=1))
        repo.create(_lembrete('b', datetime(2025, 1, 2), categoria_id=1))
        repo.create(_lembrete('c', datetime(2025, 1, 3), categoria_id=2))

        assert repo.desvincular_categoria(1) == 2
        assert repo.find_all(categoria_id=1) == []
        assert len(repo.find_all(categoria_id=2)) == 1


class TestCategoriaRepository:
    def test_find_by_nome_sem_diferenciar_caixa(self):
        repo = CategoriaRepository()
        repo.create({'nome': 'Saúde'})

        assert repo.find_by_nome('saúde')['nome'] == 'Saúde'
        assert repo.find_by_nome('SAÚDE ')['nome'] == 'Saúde'
        assert repo.find_by_nome('Saú') is None

    def test_find_by_nome_escapa_regex(self):
        repo = CategoriaRepository()
        repo.create({'nome': 'C++'})

        assert repo.find_by_nome('c++')['nome'] == 'C++'
        assert repo.find_by_nome('.*') is None

    def test_find_all_ordena_por_nome(self):
        repo = CategoriaRepository()
        repo.create_many([{'nome': 'Lazer'}, {'nome': 'Casa'}])

        assert [c['nome'] for c in repo.find_all()] == ['Casa', 'Lazer']
