"""
Geração de sugestões de texto para o campo de lembrete.

Localização: lembretes/sugestoes.py

Combina listas fixas de frases (ações, padrões e categorias comuns)
com as palavras mais frequentes dos lembretes já cadastrados.
"""
from collections import Counter
from typing import Any, Iterable, List, Optional
import random

MAX_SUGESTOES = 5
MAX_PALAVRAS_FREQUENTES = 10

# Sugestões padrão (início de frase)
SUGESTOES_PADRAO = (
    'Lembre-se de',
    'Verificar',
    'Confirmar',
    'Agendar',
    'Preparar',
    'Revisar',
    'Comprar',
    'Pagar',
    'Enviar',
    'Receber',
    'Entregar',
    'Participar',
    'Organizar',
    'Limpar',
    'Atualizar',
    'Verificar',
    'Confirmar',
    'Finalizar',
    'Iniciar',
    'Continuar',
)

# Padrões comuns de lembretes
PADROES_COMUNS = (
    'Reunião com',
    'Prazo para',
    'Entrega de',
    'Pagamento de',
    'Compra de',
    'Consulta com',
    'Aniversário de',
    'Evento:',
    'Projeto:',
    'Tarefa:',
    'Relatório de',
    'Apresentação para',
    'Treinamento de',
    'Manutenção de',
    'Revisão de',
)

CATEGORIAS_COMUNS = (
    'Trabalho',
    'Pessoal',
    'Saúde',
    'Finanças',
    'Família',
    'Amigos',
    'Estudos',
    'Lazer',
    'Casa',
    'Compras',
)

_rng = random.SystemRandom()


def formatar_categoria(categoria: str) -> str:
    return f'Categoria: {categoria}'


def _texto_do_lembrete(lembrete: Any) -> str:
    if isinstance(lembrete, str):
        return lembrete
    if isinstance(lembrete, dict):
        return lembrete.get('texto') or lembrete.get('text') or ''
    return getattr(lembrete, 'texto', '') or ''


def _sugestoes_padrao(rng) -> List[str]:
    """Amostra aleatória quando ainda não há texto digitado."""
    sugestoes = list(dict.fromkeys([
        *SUGESTOES_PADRAO,
        *PADROES_COMUNS,
        *(formatar_categoria(cat) for cat in CATEGORIAS_COMUNS),
    ]))
    return rng.sample(sugestoes, MAX_SUGESTOES)


def palavras_frequentes(lembretes: Iterable[Any],
                        limite: int = MAX_PALAVRAS_FREQUENTES) -> List[str]:
    """
    Retorna as palavras mais frequentes nos lembretes existentes.

    Ignora palavras com até 2 caracteres. Empates mantêm a ordem
    em que a palavra apareceu pela primeira vez.
    """
    contagem = Counter()
    for lembrete in lembretes:
        for palavra in _texto_do_lembrete(lembrete).lower().split(' '):
            if len(palavra) > 2:
                contagem[palavra] += 1

    return [palavra for palavra, _ in contagem.most_common(limite)]


def _sugestoes_contexto(lembretes: List[Any], palavras: List[str]) -> List[str]:
    sugestoes = []

    def aparece(trecho: str) -> bool:
        trecho = trecho.lower()
        return any(trecho in palavra for palavra in palavras)

    for padrao in PADROES_COMUNS:
        if aparece(padrao):
            sugestoes.append(padrao)

    for categoria in CATEGORIAS_COMUNS:
        if aparece(categoria):
            sugestoes.append(formatar_categoria(categoria))

    if lembretes:
        for palavra in palavras_frequentes(lembretes):
            if aparece(palavra):
                sugestoes.append(palavra)

    return sugestoes


def _sugestoes_palavra(ultima_palavra: str) -> List[str]:
    # Palavras muito curtas não completam nada
    if len(ultima_palavra) < 2:
        return []

    sugestoes = [s for s in SUGESTOES_PADRAO if s.lower().startswith(ultima_palavra)]
    sugestoes += [p for p in PADROES_COMUNS if p.lower().startswith(ultima_palavra)]
    sugestoes += [
        formatar_categoria(c) for c in CATEGORIAS_COMUNS
        if c.lower().startswith(ultima_palavra)
    ]
    return sugestoes


def gerar_sugestoes(lembretes: Iterable[Any], texto_atual: str,
                    rng: Optional[random.Random] = None) -> List[str]:
    """
    Gera até 5 sugestões de texto para o que está sendo digitado.

    Args:
        lembretes: Lembretes existentes (dicts com 'texto', objetos ou strings)
        texto_atual: Texto atual do campo
        rng: Fonte de aleatoriedade para as sugestões padrão
             (default: random.SystemRandom)

    Returns:
        Lista de sugestões sem duplicatas. Texto em branco devolve uma
        amostra aleatória das listas fixas; texto sem correspondência
        devolve lista vazia.
    """
    if not (texto_atual or '').strip():
        return _sugestoes_padrao(rng or _rng)

    lembretes = list(lembretes or [])
    palavras = texto_atual.lower().split(' ')
    ultima_palavra = palavras[-1]

    todas = _sugestoes_contexto(lembretes, palavras) + _sugestoes_palavra(ultima_palavra)
    return list(dict.fromkeys(todas))[:MAX_SUGESTOES]
