from datetime import datetime
import random

import pytest

from lembretes.services.categoria_service import CategoriaService
from lembretes.services.lembrete_service import LembreteService


class TestCriarLembrete:
    def test_cria_com_defaults(self, criar_lembrete):
        lembrete = criar_lembrete(texto='  Pagar conta de luz  ', data='10/03/2025')

        assert lembrete['_id'] == 1
        assert lembrete['texto'] == 'Pagar conta de luz'
        assert lembrete['data'] == datetime(2025, 3, 10)
        assert lembrete['prioridade'] == 0
        assert lembrete['concluido'] is False
        assert lembrete['categoria_id'] is None
        assert lembrete['descricao'] is None

    def test_aceita_data_iso(self, criar_lembrete):
        assert criar_lembrete(data='2025-03-10')['data'] == datetime(2025, 3, 10)

    @pytest.mark.parametrize('texto, data', [('', '10/03/2025'), ('   ', '10/03/2025'), ('Algo', '')])
    def test_texto_e_data_obrigatorios(self, texto, data):
        with pytest.raises(ValueError, match='Texto e data são obrigatórios'):
            LembreteService().criar_lembrete(texto=texto, data=data)

    def test_texto_maximo_500(self, criar_lembrete):
        criar_lembrete(texto='a' * 500)
        with pytest.raises(ValueError, match='500'):
            criar_lembrete(texto='a' * 501)

    @pytest.mark.parametrize('prioridade', [3, -1, 'alta', True])
    def test_prioridade_invalida(self, criar_lembrete, prioridade):
        with pytest.raises(ValueError, match='Prioridade'):
            criar_lembrete(prioridade=prioridade)

    def test_prioridade_como_string(self, criar_lembrete):
        assert criar_lembrete(prioridade='2')['prioridade'] == 2

    def test_data_invalida(self, criar_lembrete):
        with pytest.raises(ValueError, match='Data inválida'):
            criar_lembrete(data='31/04/2024')

    def test_categoria_inexistente(self, criar_lembrete):
        with pytest.raises(ValueError, match='Categoria não encontrada'):
            criar_lembrete(categoria_id=99)

    def test_com_categoria(self, criar_lembrete, criar_categoria):
        categoria = criar_categoria('Casa')
        assert criar_lembrete(categoria_id=str(categoria['_id']))['categoria_id'] == categoria['_id']


class TestAtualizarLembrete:
    def test_atualiza_somente_campos_enviados(self, criar_lembrete):
        lembrete = criar_lembrete(prioridade=1)

        atualizado = LembreteService().atualizar_lembrete(
            lembrete['_id'], {'texto': 'Novo texto', 'data': '2025-04-01'}
        )
        assert atualizado['texto'] == 'Novo texto'
        assert atualizado['data'] == datetime(2025, 4, 1)
        assert atualizado['prioridade'] == 1

    def test_ignora_campos_desconhecidos(self, criar_lembrete):
        lembrete = criar_lembrete()
        atualizado = LembreteService().atualizar_lembrete(lembrete['_id'], {'_id': 50, 'foo': 'bar'})
        assert atualizado['_id'] == lembrete['_id']
        assert 'foo' not in atualizado

    def test_remove_categoria_com_vazio(self, criar_lembrete, criar_categoria):
        categoria = criar_categoria()
        lembrete = criar_lembrete(categoria_id=categoria['_id'])

        atualizado = LembreteService().atualizar_lembrete(lembrete['_id'], {'categoria_id': ''})
        assert atualizado['categoria_id'] is None

    def test_inexistente_retorna_none(self):
        assert LembreteService().atualizar_lembrete(42, {'texto': 'x'}) is None

    def test_texto_vazio_invalido(self, criar_lembrete):
        lembrete = criar_lembrete()
        with pytest.raises(ValueError, match='Texto é obrigatório'):
            LembreteService().atualizar_lembrete(lembrete['_id'], {'texto': '  '})

    @pytest.mark.parametrize('valor, esperado', [
        ('false', False), ('0', False), ('off', False), ('não', False),
        ('true', True), ('sim', True), (1, True), (False, False),
    ])
    def test_concluido_interpreta_strings(self, criar_lembrete, valor, esperado):
        lembrete = criar_lembrete()
        if not esperado:
            LembreteService().alternar_concluido(lembrete['_id'])

        atualizado = LembreteService().atualizar_lembrete(lembrete['_id'], {'concluido': valor})
        assert atualizado['concluido'] is esperado

    @pytest.mark.parametrize('valor', ['talvez', 2, None, []])
    def test_concluido_invalido(self, criar_lembrete, valor):
        lembrete = criar_lembrete()
        with pytest.raises(ValueError, match='Concluído deve ser verdadeiro ou falso'):
            LembreteService().atualizar_lembrete(lembrete['_id'], {'concluido': valor})

    def test_texto_e_descricao_precisam_ser_string(self, criar_lembrete):
        lembrete = criar_lembrete()
        service = LembreteService()
        with pytest.raises(ValueError, match='Texto deve ser uma string'):
            service.atualizar_lembrete(lembrete['_id'], {'texto': 123})
        with pytest.raises(ValueError, match='Descrição deve ser uma string'):
            service.atualizar_lembrete(lembrete['_id'], {'descricao': ['a']})

    def test_chave_lembrete_id_no_corpo_e_ignorada(self, criar_lembrete):
        lembrete = criar_lembrete()
        atualizado = LembreteService().atualizar_lembrete(
            lembrete['_id'], {'lembrete_id': 5, 'texto': 'Outro'}
        )
        assert atualizado['_id'] == lembrete['_id']
        assert atualizado['texto'] == 'Outro'


class TestOutrasOperacoes:
    def test_alternar_concluido(self, criar_lembrete):
        lembrete = criar_lembrete()
        service = LembreteService()

        assert service.alternar_concluido(lembrete['_id'])['concluido'] is True
        assert service.alternar_concluido(lembrete['_id'])['concluido'] is False
        assert service.alternar_concluido(999) is None

    def test_excluir(self, criar_lembrete):
        lembrete = criar_lembrete()
        service = LembreteService()

        assert service.excluir_lembrete(lembrete['_id']) is True
        assert service.obter_lembrete(lembrete['_id']) is None
        assert service.excluir_lembrete(lembrete['_id']) is False

    def test_listar_com_filtros(self, criar_lembrete):
        criar_lembrete(texto='a', data='01/01/2025', prioridade=2)
        criar_lembrete(texto='b', data='02/01/2025')
        service = LembreteService()

        assert [l['texto'] for l in service.listar_lembretes(prioridade='2')] == ['a']
        with pytest.raises(ValueError):
            service.listar_lembretes(prioridade=7)
        with pytest.raises(ValueError):
            service.listar_lembretes(categoria_id='abc')

    def test_sugerir_textos_usa_historico(self, criar_lembrete):
        criar_lembrete(texto='Pagar conta de luz')
        criar_lembrete(texto='Pagar conta de água')

        assert LembreteService().sugerir_textos('conta') == ['conta']

    def test_sugerir_textos_vazio_usa_rng(self):
        rng = random.Random(1)
        esperado = LembreteService().sugerir_textos('', rng=random.Random(1))
        assert LembreteService().sugerir_textos('', rng=rng) == esperado


class TestCategoriaService:
    def test_cria_categoria(self):
        categoria = CategoriaService().create_categoria(nome=' Trabalho ', cor='#AABBCC')
        assert categoria['nome'] == 'Trabalho'
        assert categoria['cor'] == '#aabbcc'

    def test_nome_duplicado(self, criar_categoria):
        criar_categoria('Trabalho')
        with pytest.raises(ValueError, match='já existe'):
            CategoriaService().create_categoria(nome='trabalho')

    @pytest.mark.parametrize('nome, cor, mensagem', [
        ('', None, 'obrigatório'),
        ('x' * 51, None, '50'),
        ('Casa', 'azul', 'rrggbb'),
    ])
    def test_dados_invalidos(self, nome, cor, mensagem):
        with pytest.raises(ValueError, match=mensagem):
            CategoriaService().create_categoria(nome=nome, cor=cor)

    def test_excluir_desvincula_lembretes(self, criar_lembrete, criar_categoria):
        categoria = criar_categoria()
        lembrete = criar_lembrete(categoria_id=categoria['_id'])
        service = CategoriaService()

        assert service.delete_categoria(categoria['_id']) is True
        assert LembreteService().obter_lembrete(lembrete['_id'])['categoria_id'] is None
        assert service.delete_categoria(categoria['_id']) is False

    def test_popular_predefinidas_sem_duplicar(self, criar_categoria):
        criar_categoria('Casa')
        service = CategoriaService()

        criadas = service.popular_categorias_predefinidas()
        assert len(criadas) == 9
        assert service.popular_categorias_predefinidas() == []
        assert len(service.get_categorias()) == 10

