"""
Modelo de Lembrete.

Localização: lembretes/models/lembrete_model.py

Schema no MongoDB:
{
  _id: Int,                 # ID sequencial
  texto: String,            # Texto do lembrete (até 500 caracteres)
  data: ISODate,            # Data do lembrete (meia-noite)
  prioridade: Int,          # 0 = baixa, 1 = média, 2 = alta
  concluido: Boolean,
  categoria_id: Int|null,   # Referência para categorias._id
  descricao: String|null,
  created_at: ISODate,
  updated_at: ISODate
}
"""
from typing import Dict, Any, Optional
from datetime import datetime, date, time
from lembretes.utils_datas import converter_para_date, formatar_data_br


class LembreteModel:
    """
    Modelo de dados para lembretes.
    """

    TEXTO_MAX_LENGTH = 500

    PRIORIDADE_BAIXA = 0
    PRIORIDADE_MEDIA = 1
    PRIORIDADE_ALTA = 2

    PRIORIDADES = [
        (PRIORIDADE_BAIXA, 'Baixa'),
        (PRIORIDADE_MEDIA, 'Média'),
        (PRIORIDADE_ALTA, 'Alta'),
    ]

    VALORES_VERDADEIROS = ('true', '1', 'sim', 'on')
    VALORES_FALSOS = ('false', '0', 'nao', 'não', 'off')

    @staticmethod
    def validar_texto(texto: Optional[str]) -> str:
        if texto is not None and not isinstance(texto, str):
            raise ValueError("Texto deve ser uma string")
        texto = (texto or '').strip()
        if not texto:
            raise ValueError("Texto é obrigatório")
        if len(texto) > LembreteModel.TEXTO_MAX_LENGTH:
            raise ValueError(
                f"Texto deve ter no máximo {LembreteModel.TEXTO_MAX_LENGTH} caracteres"
            )
        return texto

    @staticmethod
    def validar_prioridade(prioridade: Any) -> int:
        if prioridade is None or prioridade == '':
            return LembreteModel.PRIORIDADE_BAIXA
        try:
            valor = int(prioridade)
        except (TypeError, ValueError):
            raise ValueError("Prioridade inválida")
        if isinstance(prioridade, bool) or valor not in dict(LembreteModel.PRIORIDADES):
            raise ValueError("Prioridade deve ser 0 (baixa), 1 (média) ou 2 (alta)")
        return valor

    @staticmethod
    def validar_descricao(descricao: Any) -> Optional[str]:
        if descricao is None:
            return None
        if not isinstance(descricao, str):
            raise ValueError("Descrição deve ser uma string")
        return descricao.strip() or None

    @staticmethod
    def validar_concluido(valor: Any) -> bool:
        """
        Aceita bool, 0/1 ou as strings usadas em formulários
        ("true"/"false", "sim"/"não", "on"/"off").
        """
        if isinstance(valor, bool):
            return valor
        if isinstance(valor, int) and valor in (0, 1):
            return bool(valor)
        if isinstance(valor, str):
            texto = valor.strip().lower()
            if texto in LembreteModel.VALORES_VERDADEIROS:
                return True
            if texto in LembreteModel.VALORES_FALSOS:
                return False
        raise ValueError("Concluído deve ser verdadeiro ou falso")

    @staticmethod
    def data_para_datetime(valor: Any) -> datetime:
        """
        Converte a data recebida (dd/mm/aaaa, ISO ou date) para o datetime
        armazenado no MongoDB (meia-noite, sem timezone).
        """
        return datetime.combine(converter_para_date(valor), time.min)

    @staticmethod
    def create_lembrete_data(texto: str, data: Any, prioridade: Any = 0,
                             categoria_id: Optional[int] = None,
                             descricao: Optional[str] = None,
                             concluido: bool = False) -> Dict[str, Any]:
        """
        Cria estrutura de dados de lembrete.

        Raises:
            ValueError: Se texto, data ou prioridade forem inválidos
        """
        return {
            'texto': LembreteModel.validar_texto(texto),
            'data': LembreteModel.data_para_datetime(data),
            'prioridade': LembreteModel.validar_prioridade(prioridade),
            'concluido': LembreteModel.validar_concluido(concluido),
            'categoria_id': categoria_id,
            'descricao': LembreteModel.validar_descricao(descricao),
        }

    @staticmethod
    def to_dict(doc: Dict[str, Any]) -> Dict[str, Any]:
        """
        Serializa o documento do MongoDB para JSON/templates.
        """
        data = doc.get('data')
        if isinstance(data, datetime):
            data = data.date()

        def iso(valor):
            return valor.isoformat() if isinstance(valor, (datetime, date)) else valor

        return {
            'id': doc.get('_id'),
            'texto': doc.get('texto'),
            'data': iso(data),
            'data_formatada': formatar_data_br(data),
            'prioridade': doc.get('prioridade', LembreteModel.PRIORIDADE_BAIXA),
            'concluido': doc.get('concluido', False),
            'categoria_id': doc.get('categoria_id'),
            'descricao': doc.get('descricao'),
            'created_at': iso(doc.get('created_at')),
            'updated_at': iso(doc.get('updated_at')),
        }
