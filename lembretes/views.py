"""
Views do app lembretes.

Localização: lembretes/views.py

Páginas HTML (lista, edição e categorias) e endpoints JSON da API.
As views chamam services para executar a lógica de negócio e
retornam respostas.
"""
from django.shortcuts import render, redirect
from django.http import JsonResponse, Http404
from django.contrib import messages
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST, require_GET
import json
import logging
from lembretes.services.lembrete_service import LembreteService
from lembretes.services.categoria_service import CategoriaService
from lembretes.models.lembrete_model import LembreteModel
from lembretes.models.categoria_model import CategoriaModel
from lembretes.utils_datas import (
    formatar_data_input, estado_mascara, validar_data, TAMANHO_DATA_COMPLETA,
    MENSAGEM_DATA_INVALIDA,
)
from core.decorators import audit_log
from core.repositories.base_repository import parse_id

logger = logging.getLogger(__name__)


def _json(data, status=200):
    return JsonResponse(data, status=status, safe=False,
                        json_dumps_params={'ensure_ascii': False})


def _ler_json(request) -> dict:
    """
    Lê o corpo JSON da requisição.

    Raises:
        ValueError: Se o corpo não for um objeto JSON
    """
    try:
        data = json.loads(request.body or b'{}')
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise ValueError("JSON inválido")
    if not isinstance(data, dict):
        raise ValueError("JSON inválido")
    return data


def _parse_bool(valor):
    if valor is None or valor == '':
        return None
    if isinstance(valor, bool):
        return valor
    return str(valor).lower() in ('1', 'true', 'sim', 'on')


def _lembrete_para_template(lembrete, categorias_por_id):
    item = LembreteModel.to_dict(lembrete)
    categoria = categorias_por_id.get(item['categoria_id'])
    item['categoria'] = categoria['nome'] if categoria else None
    item['categoria_cor'] = categoria.get('cor') if categoria else None
    item['prioridade_label'] = dict(LembreteModel.PRIORIDADES).get(item['prioridade'], '')
    return item


def _form_lembrete(request):
    """Extrai os campos do formulário de lembrete (POST)."""
    return {
        'texto': request.POST.get('texto', '').strip(),
        'data': formatar_data_input(request.POST.get('data', '')),
        'prioridade': request.POST.get('prioridade', '0'),
        'categoria_id': request.POST.get('categoria_id', ''),
        'descricao': request.POST.get('descricao', ''),
    }


def _validar_form_data(form):
    """
    Valida a data mascarada do formulário antes de chamar o service.

    Raises:
        ValueError: Se campos obrigatórios faltando ou data inválida
    """
    if not form['texto'] or not form['data']:
        raise ValueError("Por favor, preencha todos os campos")
    if len(form['data']) != TAMANHO_DATA_COMPLETA or not validar_data(form['data']):
        raise ValueError(MENSAGEM_DATA_INVALIDA)


# ---------------------------------------------------------------------------
# Páginas
# ---------------------------------------------------------------------------

def index_view(request):
    """
    Página principal: lista de lembretes e formulário de criação.

    GET: Exibe lista ordenada por data
    POST: Cria novo lembrete
    """
    service = LembreteService()
    categoria_service = CategoriaService()
    form = {'texto': '', 'data': '', 'prioridade': '0', 'categoria_id': '', 'descricao': ''}

    if request.method == 'POST':
        form = _form_lembrete(request)
        try:
            _validar_form_data(form)
            service.criar_lembrete(
                texto=form['texto'],
                data=form['data'],
                prioridade=form['prioridade'],
                categoria_id=form['categoria_id'] or None,
                descricao=form['descricao']
            )
            messages.success(request, 'Lembrete criado com sucesso!')
            return redirect('lembretes:index')
        except ValueError as e:
            messages.error(request, str(e))

    filtro = request.GET.get('filtro', 'todos')
    concluido = {'pendentes': False, 'concluidos': True}.get(filtro)

    categorias = categoria_service.get_categorias()
    categorias_por_id = {cat['_id']: cat for cat in categorias}
    lembretes = [
        _lembrete_para_template(lembrete, categorias_por_id)
        for lembrete in service.listar_lembretes(concluido=concluido)
    ]

    return render(request, 'lembretes/index.html', {
        'lembretes': lembretes,
        'categorias': [CategoriaModel.to_dict(cat) for cat in categorias],
        'prioridades': LembreteModel.PRIORIDADES,
        'form': form,
        'filtro': filtro,
    })


def editar_view(request, lembrete_id):
    """
    Edição de um lembrete.

    GET: Formulário preenchido
    POST: Salva alterações
    """
    service = LembreteService()
    lembrete = service.obter_lembrete(lembrete_id)
    if not lembrete:
        raise Http404("Lembrete não encontrado")

    atual = LembreteModel.to_dict(lembrete)
    form = {
        'texto': atual['texto'],
        'data': atual['data_formatada'],
        'prioridade': str(atual['prioridade']),
        'categoria_id': str(atual['categoria_id'] or ''),
        'descricao': atual['descricao'] or '',
    }

    if request.method == 'POST':
        form = _form_lembrete(request)
        try:
            _validar_form_data(form)
            service.atualizar_lembrete(lembrete_id, form)
            messages.success(request, 'Lembrete atualizado com sucesso!')
            return redirect('lembretes:index')
        except ValueError as e:
            messages.error(request, str(e))

    return render(request, 'lembretes/editar.html', {
        'lembrete': atual,
        'categorias': [CategoriaModel.to_dict(cat) for cat in CategoriaService().get_categorias()],
        'prioridades': LembreteModel.PRIORIDADES,
        'form': form,
    })


@require_POST
def excluir_view(request, lembrete_id):
    if LembreteService().excluir_lembrete(lembrete_id):
        messages.success(request, 'Lembrete excluído com sucesso!')
    else:
        messages.error(request, 'Lembrete não encontrado')
    return redirect('lembretes:index')


@require_POST
def concluir_view(request, lembrete_id):
    if not LembreteService().alternar_concluido(lembrete_id):
        messages.error(request, 'Lembrete não encontrado')
    return redirect('lembretes:index')


def categorias_view(request):
    """
    View para gerenciar categorias.

    GET: Exibe lista de categorias e formulário para adicionar
    POST: Cria nova categoria (ou as categorias sugeridas)
    """
    service = CategoriaService()

    if request.method == 'POST':
        try:
            if request.POST.get('acao') == 'predefinidas':
                criadas = service.popular_categorias_predefinidas()
                messages.success(request, f'{len(criadas)} categoria(s) criada(s)')
            else:
                categoria = service.create_categoria(
                    nome=request.POST.get('nome', ''),
                    cor=request.POST.get('cor', '')
                )
                messages.success(request, f"Categoria '{categoria['nome']}' criada com sucesso!")
            return redirect('lembretes:categorias')
        except ValueError as e:
            messages.error(request, str(e))

    return render(request, 'lembretes/categorias.html', {
        'categorias': [CategoriaModel.to_dict(cat) for cat in service.get_categorias()],
    })


@require_POST
def excluir_categoria_view(request, categoria_id):
    if CategoriaService().delete_categoria(categoria_id):
        messages.success(request, 'Categoria excluída com sucesso!')
    else:
        messages.error(request, 'Categoria não encontrada')
    return redirect('lembretes:categorias')


# ---------------------------------------------------------------------------
# API
# ---------------------------------------------------------------------------

@csrf_exempt
@audit_log(entity='lembrete')
def lembretes_api_view(request):
    """
    API de lembretes.

    GET /api/lembretes/?concluido=false&prioridade=2&categoria_id=1
    POST /api/lembretes/

    Body JSON (POST):
    {
        "texto": "Pagar conta de luz",
        "data": "2024-02-29",          # ou "29/02/2024"
        "prioridade": 1,
        "categoria_id": 3,
        "descricao": "Vence hoje"
    }
    """
    service = LembreteService()

    if request.method == 'GET':
        try:
            lembretes = service.listar_lembretes(
                concluido=_parse_bool(request.GET.get('concluido')),
                prioridade=request.GET.get('prioridade') or None,
                categoria_id=request.GET.get('categoria_id') or None
            )
            logger.info(f"[LEMBRETES_API] {len(lembretes)} lembretes encontrados")
            return _json([LembreteModel.to_dict(lembrete) for lembrete in lembretes])
        except ValueError as e:
            return _json({'error': str(e)}, status=400)
        except Exception as e:
            logger.error(f"[LEMBRETES_API] Erro ao buscar lembretes: {e}", exc_info=True)
            return _json({'error': 'Erro ao buscar lembretes', 'message': str(e)}, status=500)

    if request.method != 'POST':
        return _json({'error': 'Método não permitido'}, status=405)

    try:
        data = _ler_json(request)
        texto = data.get('texto')
        data_lembrete = data.get('data')

        if not texto or not data_lembrete:
            return _json({'error': 'Texto e data são obrigatórios'}, status=400)

        lembrete = service.criar_lembrete(
            texto=texto,
            data=data_lembrete,
            prioridade=data.get('prioridade', 0),
            categoria_id=data.get('categoria_id'),
            descricao=data.get('descricao')
        )
        return _json(LembreteModel.to_dict(lembrete), status=201)

    except ValueError as e:
        return _json({'error': str(e)}, status=400)
    except Exception as e:
        logger.error(f"[LEMBRETES_API] Erro ao criar lembrete: {e}", exc_info=True)
        return _json({'error': 'Erro ao criar lembrete', 'message': str(e)}, status=500)


@csrf_exempt
@audit_log(entity='lembrete', id_kwarg='lembrete_id')
def lembrete_detail_api_view(request, lembrete_id):
    """
    API de um lembrete específico.

    GET /api/lembretes/<id>/
    PUT|PATCH /api/lembretes/<id>/   (apenas os campos enviados são alterados)
    DELETE /api/lembretes/<id>/
    """
    if parse_id(lembrete_id) is None:
        return _json({'error': 'ID inválido'}, status=400)

    service = LembreteService()

    try:
        if request.method == 'GET':
            lembrete = service.obter_lembrete(lembrete_id)
            if not lembrete:
                return _json({'error': 'Lembrete não encontrado'}, status=404)
            return _json(LembreteModel.to_dict(lembrete))

        if request.method in ('PUT', 'PATCH'):
            data = _ler_json(request)
            lembrete = service.atualizar_lembrete(lembrete_id, data)
            if not lembrete:
                return _json({'error': 'Lembrete não encontrado'}, status=404)
            return _json(LembreteModel.to_dict(lembrete))

        if request.method == 'DELETE':
            if not service.excluir_lembrete(lembrete_id):
                return _json({'error': 'Lembrete não encontrado'}, status=404)
            return _json({'message': 'Lembrete deletado com sucesso'})

        return _json({'error': 'Método não permitido'}, status=405)

    except ValueError as e:
        return _json({'error': str(e)}, status=400)
    except Exception as e:
        logger.error(f"[LEMBRETES_API] Erro no lembrete {lembrete_id}: {e}", exc_info=True)
        return _json({'error': 'Erro ao processar lembrete', 'message': str(e)}, status=500)


@csrf_exempt
@audit_log(entity='categoria')
def categorias_api_view(request):
    """
    API de categorias.

    GET /api/categorias/
    POST /api/categorias/  {"nome": "Trabalho", "cor": "#3366ff"}
    """
    service = CategoriaService()

    try:
        if request.method == 'GET':
            return _json([CategoriaModel.to_dict(cat) for cat in service.get_categorias()])

        if request.method == 'POST':
            data = _ler_json(request)
            categoria = service.create_categoria(nome=data.get('nome'), cor=data.get('cor'))
            return _json(CategoriaModel.to_dict(categoria), status=201)

        return _json({'error': 'Método não permitido'}, status=405)

    except ValueError as e:
        return _json({'error': str(e)}, status=400)
    except Exception as e:
        logger.error(f"[CATEGORIAS_API] Erro: {e}", exc_info=True)
        return _json({'error': 'Erro ao processar categorias', 'message': str(e)}, status=500)


@csrf_exempt
@audit_log(entity='categoria', id_kwarg='categoria_id')
def categoria_detail_api_view(request, categoria_id):
    """
    DELETE /api/categorias/<id>/
    """
    if parse_id(categoria_id) is None:
        return _json({'error': 'ID inválido'}, status=400)

    if request.method != 'DELETE':
        return _json({'error': 'Método não permitido'}, status=405)

    try:
        if not CategoriaService().delete_categoria(categoria_id):
            return _json({'error': 'Categoria não encontrada'}, status=404)
        return _json({'message': 'Categoria deletada com sucesso'})
    except Exception as e:
        logger.error(f"[CATEGORIAS_API] Erro ao deletar categoria {categoria_id}: {e}", exc_info=True)
        return _json({'error': 'Erro ao deletar a categoria', 'message': str(e)}, status=500)


@require_GET
def sugestoes_api_view(request):
    """
    Sugestões para o texto sendo digitado.

    GET /api/sugestoes/?texto=Reu
    """
    try:
        sugestoes = LembreteService().sugerir_textos(request.GET.get('texto', ''))
        return _json({'sugestoes': sugestoes})
    except Exception as e:
        logger.error(f"[SUGESTOES_API] Erro ao gerar sugestões: {e}", exc_info=True)
        return _json({'error': 'Erro ao gerar sugestões', 'message': str(e)}, status=500)


@require_GET
def mascara_data_api_view(request):
    """
    Máscara e validação da data digitada.

    GET /api/datas/mascara/?valor=29022024
    -> {"valor": "29022024", "formatada": "29/02/2024", "valida": true}

    "valida" é null enquanto a data não estiver completa. "valor" devolve
    o texto recebido; o cliente descarta respostas de teclas antigas.
    """
    valor = request.GET.get('valor', '')
    formatada, valida = estado_mascara(valor)
    return _json({
        'valor': valor,
        'formatada': formatada,
        'valida': valida,
        'erro': MENSAGEM_DATA_INVALIDA if valida is False else None,
    })
