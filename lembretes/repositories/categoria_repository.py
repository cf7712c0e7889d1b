"""
Repository para categorias no MongoDB.

Localização: lembretes/repositories/categoria_repository.py
"""
from typing import Optional, List, Dict, Any
import re
from core.repositories.base_repository import BaseRepository


class CategoriaRepository(BaseRepository):
    """
    Repository para gerenciar categorias no MongoDB.
    """

    def __init__(self):
        super().__init__('categorias')

    def _ensure_indexes(self):
        """
        Nome da categoria é único.
        """
        self.collection.create_index('nome', unique=True)

    def find_all(self) -> List[Dict[str, Any]]:
        return self.find_many(sort=[('nome', 1)])

    def find_by_nome(self, nome: str) -> Optional[Dict[str, Any]]:
        """
        Busca categoria pelo nome, sem diferenciar maiúsculas/minúsculas.
        """
        return self.collection.find_one({
            'nome': {'$regex': f'^{re.escape(nome.strip())}$', '$options': 'i'}
        })

    def create_many(self, categorias: List[Dict[str, Any]]) -> List[int]:
        """
        Cria múltiplas categorias de uma vez.

        Returns:
            Lista de IDs das categorias criadas
        """
        return [self.create(cat)['_id'] for cat in categorias]
