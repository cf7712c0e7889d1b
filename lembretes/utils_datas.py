"""
Utilitários para a máscara de data dos formulários de lembrete.
Usa timezone America/Sao_Paulo (Brasília) para saber o ano atual.
"""
from datetime import datetime, date
from typing import Optional, Tuple
import calendar
import re

import pytz
from dateutil import parser as date_parser

TZ = pytz.timezone("America/Sao_Paulo")

TAMANHO_DATA_COMPLETA = 10
ANO_MINIMO = 1980
ANOS_FUTUROS = 10

MENSAGEM_DATA_INVALIDA = "Data inválida. Use o formato dd/mm/aaaa"


def _ano_atual_brasilia() -> int:
    """Retorna o ano corrente no fuso de Brasília."""
    return datetime.now(TZ).year


def formatar_data_input(valor: str) -> str:
    """
    Formata a entrada de data para o formato dd/mm/aaaa.

    Remove caracteres não numéricos, limita a 8 dígitos e adiciona
    as barras automaticamente. Não valida nada.

    Exemplos:
        "12345678" -> "12/34/5678"
        "1a2b3"    -> "12/3"
    """
    numeros = re.sub(r"[^0-9]", "", valor or "")[:8]

    data_formatada = numeros
    if len(numeros) > 2:
        data_formatada = numeros[:2] + "/" + numeros[2:]
    if len(numeros) > 4:
        data_formatada = data_formatada[:5] + "/" + data_formatada[5:]

    return data_formatada


def _dias_no_mes(mes: int, ano: int) -> int:
    if mes == 2 and calendar.isleap(ano):
        return 29
    return calendar.mdays[mes]


def validar_data(data: str, ano_atual: Optional[int] = None) -> bool:
    """
    Valida se uma data dd/mm/aaaa existe no calendário.

    Verifica:
    1. Se dia, mês e ano são números inteiros
    2. Se o mês está entre 1 e 12
    3. Se o dia está dentro do limite do mês (considera anos bissextos)
    4. Se o ano está entre 1980 e o ano atual + 10

    Exemplos:
        "29/02/2024" -> True (2024 é bissexto)
        "29/02/2023" -> False
        "31/04/2024" -> False (abril tem 30 dias)
    """
    partes = (data or "").split("/")
    if len(partes) != 3:
        return False

    # Apenas dígitos ASCII em cada parte
    if not all(parte.isascii() and parte.isdigit() for parte in partes):
        return False
    dia, mes, ano = (int(parte) for parte in partes)

    if mes < 1 or mes > 12:
        return False

    if dia < 1 or dia > _dias_no_mes(mes, ano):
        return False

    if ano_atual is None:
        ano_atual = _ano_atual_brasilia()
    if ano < ANO_MINIMO or ano > ano_atual + ANOS_FUTUROS:
        return False

    return True


def estado_mascara(valor: str, ano_atual: Optional[int] = None) -> Tuple[str, Optional[bool]]:
    """
    Aplica a máscara e calcula a validade a cada tecla digitada.

    Returns:
        (data_formatada, valida) onde valida é None enquanto a data
        não tem os 10 caracteres de dd/mm/aaaa.
    """
    formatada = formatar_data_input(valor)
    if len(formatada) < TAMANHO_DATA_COMPLETA:
        return formatada, None
    return formatada, validar_data(formatada, ano_atual=ano_atual)


def converter_para_date(valor, ano_atual: Optional[int] = None) -> date:
    """
    Converte a data digitada no formulário para date.

    Aceita dd/mm/aaaa (com ou sem barras) ou uma data ISO 8601
    (ex.: "2024-02-29" ou "2024-02-29T00:00:00.000Z").

    Raises:
        ValueError: Se a data for inválida
    """
    if isinstance(valor, datetime):
        return valor.date()
    if isinstance(valor, date):
        return valor
    if not isinstance(valor, str) or not valor.strip():
        raise ValueError(MENSAGEM_DATA_INVALIDA)

    texto = valor.strip()

    # ISO: 2024-02-29 / 2024-02-29T03:00:00Z
    if re.match(r"^\d{4}-\d{2}-\d{2}", texto):
        try:
            dt = date_parser.isoparse(texto)
        except ValueError:
            raise ValueError(MENSAGEM_DATA_INVALIDA)
        if dt.tzinfo is not None:
            dt = dt.astimezone(TZ)
        return dt.date()

    formatada = formatar_data_input(texto)
    if len(formatada) != TAMANHO_DATA_COMPLETA or not validar_data(formatada, ano_atual=ano_atual):
        raise ValueError(MENSAGEM_DATA_INVALIDA)

    dia, mes, ano = (int(parte) for parte in formatada.split("/"))
    return date(ano, mes, dia)


def formatar_data_br(valor) -> str:
    """Formata date/datetime como dd/mm/aaaa (string vazia se None)."""
    if not valor:
        return ""
    return valor.strftime("%d/%m/%Y")
