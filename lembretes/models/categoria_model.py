"""
Modelo de Categoria.

Localização: lembretes/models/categoria_model.py

Schema no MongoDB:
{
  _id: Int,
  nome: String,             # Nome único da categoria
  cor: String|null,         # Cor de exibição (#rrggbb)
  created_at: ISODate,
  updated_at: ISODate
}
"""
from typing import Dict, Any, Optional
from datetime import datetime
import re

from lembretes.sugestoes import CATEGORIAS_COMUNS

COR_REGEX = re.compile(r'^#[0-9a-fA-F]{6}$')


class CategoriaModel:
    """
    Modelo de dados para categorias.
    """

    NOME_MAX_LENGTH = 50

    @staticmethod
    def create_categoria_data(nome: str, cor: Optional[str] = None) -> Dict[str, Any]:
        """
        Cria estrutura de dados de categoria.

        Args:
            nome: Nome da categoria
            cor: Cor no formato #rrggbb (opcional)

        Returns:
            Dict com dados da categoria

        Raises:
            ValueError: Se nome ou cor forem inválidos
        """
        nome = (nome or '').strip()
        if not nome:
            raise ValueError("Nome da categoria é obrigatório")
        if len(nome) > CategoriaModel.NOME_MAX_LENGTH:
            raise ValueError(
                f"Nome da categoria deve ter no máximo {CategoriaModel.NOME_MAX_LENGTH} caracteres"
            )

        cor = (cor or '').strip() or None
        if cor and not COR_REGEX.match(cor):
            raise ValueError("Cor deve estar no formato #rrggbb")

        return {
            'nome': nome,
            'cor': cor.lower() if cor else None,
        }

    @staticmethod
    def get_categorias_predefinidas():
        """
        Retorna as categorias sugeridas para quem ainda não cadastrou nenhuma.
        """
        return list(CATEGORIAS_COMUNS)

    @staticmethod
    def to_dict(doc: Dict[str, Any]) -> Dict[str, Any]:
        created_at = doc.get('created_at')
        return {
            'id': doc.get('_id'),
            'nome': doc.get('nome'),
            'cor': doc.get('cor'),
            'created_at': created_at.isoformat() if isinstance(created_at, datetime) else created_at,
        }
