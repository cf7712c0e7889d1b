"""
Repository para lembretes.

Localização: lembretes/repositories/lembrete_repository.py

Gerencia operações CRUD de lembretes no MongoDB.
"""
from typing import List, Dict, Any, Optional
from core.repositories.base_repository import BaseRepository


class LembreteRepository(BaseRepository):
    """
    Repository para gerenciar lembretes no MongoDB.
    """

    def __init__(self):
        super().__init__('lembretes')

    def _ensure_indexes(self):
        """
        Cria índices usados pelos filtros da listagem.
        """
        self.collection.create_index('data')
        self.collection.create_index('prioridade')
        self.collection.create_index('concluido')
        self.collection.create_index('categoria_id')

    def find_all(self, concluido: Optional[bool] = None,
                 prioridade: Optional[int] = None,
                 categoria_id: Optional[int] = None) -> List[Dict[str, Any]]:
        """
        Lista lembretes ordenados por data (mais próximos primeiro).

        Args:
            concluido: Filtra por status (opcional)
            prioridade: Filtra por prioridade (opcional)
            categoria_id: Filtra por categoria (opcional)

        Returns:
            Lista de lembretes
        """
        query = {}
        if concluido is not None:
            query['concluido'] = concluido
        if prioridade is not None:
            query['prioridade'] = prioridade
        if categoria_id is not None:
            query['categoria_id'] = categoria_id

        return self.find_many(query=query, sort=[('data', 1), ('_id', 1)])

    def find_textos(self) -> List[Dict[str, Any]]:
        """
        Retorna apenas o texto dos lembretes (histórico para sugestões),
        na ordem de criação.
        """
        cursor = self.collection.find({}, {'texto': 1}).sort('_id', 1)
        return list(cursor)

    def desvincular_categoria(self, categoria_id: int) -> int:
        """
        Remove a referência a uma categoria excluída.

        Returns:
            Quantidade de lembretes alterados
        """
        result = self.collection.update_many(
            {'categoria_id': categoria_id},
            {'$set': {'categoria_id': None}}
        )
        return result.modified_count
