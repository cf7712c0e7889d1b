"""
Repository base para MongoDB.

Localização: core/repositories/base_repository.py

Este é um repository base que pode ser estendido por outros repositories
para compartilhar funcionalidades comuns. Os documentos usam IDs inteiros
sequenciais, gerados na collection 'counters'.
"""
from typing import Optional, Dict, Any, List
from datetime import datetime, timezone
from pymongo import ReturnDocument
from core.database import get_database


def agora_utc() -> datetime:
    return datetime.now(timezone.utc)


def parse_id(document_id) -> Optional[int]:
    """
    Converte um ID recebido (str ou int) para int.

    Returns:
        ID inteiro ou None se inválido
    """
    if isinstance(document_id, bool):
        return None
    if isinstance(document_id, int):
        return document_id
    try:
        return int(str(document_id).strip())
    except (TypeError, ValueError):
        return None


class BaseRepository:
    """
    Repository base com operações CRUD comuns.

    Exemplo de uso:
        class LembreteRepository(BaseRepository):
            def __init__(self):
                super().__init__('lembretes')
    """

    COUNTERS_COLLECTION = 'counters'

    def __init__(self, collection_name: str):
        """
        Inicializa o repository.

        Args:
            collection_name: Nome da collection no MongoDB
        """
        self.db = get_database()
        self.collection_name = collection_name
        self.collection = self.db[collection_name]
        self._ensure_indexes()

    def _ensure_indexes(self):
        """
        Cria índices necessários.
        Deve ser sobrescrito nas classes filhas.
        """
        pass

    def next_id(self) -> int:
        """
        Gera o próximo ID inteiro da collection (operação atômica).
        """
        counter = self.db[self.COUNTERS_COLLECTION].find_one_and_update(
            {'_id': self.collection_name},
            {'$inc': {'seq': 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER
        )
        return counter['seq']

    def find_by_id(self, document_id) -> Optional[Dict[str, Any]]:
        """
        Busca documento por ID.

        Args:
            document_id: ID inteiro do documento (aceita string numérica)

        Returns:
            Dict com dados do documento ou None
        """
        doc_id = parse_id(document_id)
        if doc_id is None:
            return None
        return self.collection.find_one({'_id': doc_id})

    def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return self.collection.find_one(query)

    def find_many(self, query: Dict[str, Any] = None,
                  sort: List[tuple] = None) -> List[Dict[str, Any]]:
        """
        Busca múltiplos documentos.

        Args:
            query: Query do MongoDB (None para todos)
            sort: Lista de tuplas (campo, direção) para ordenação

        Returns:
            Lista de documentos
        """
        cursor = self.collection.find(query or {})

        if sort:
            cursor = cursor.sort(sort)

        return list(cursor)

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Cria um novo documento com ID sequencial e timestamps.

        Args:
            data: Dados do documento

        Returns:
            Dict com dados do documento criado (incluindo _id)
        """
        now = agora_utc()
        data.setdefault('created_at', now)
        data.setdefault('updated_at', now)
        data['_id'] = self.next_id()
        self.collection.insert_one(data)
        return data

    def update(self, document_id, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Atualiza um documento.

        Args:
            document_id: ID do documento
            data: Dados a atualizar

        Returns:
            Documento atualizado ou None se não encontrado
        """
        doc_id = parse_id(document_id)
        if doc_id is None:
            return None

        data = dict(data)
        data['updated_at'] = agora_utc()
        return self.collection.find_one_and_update(
            {'_id': doc_id},
            {'$set': data},
            return_document=ReturnDocument.AFTER
        )

    def delete(self, document_id) -> bool:
        """
        Deleta um documento.

        Returns:
            True se deletado com sucesso
        """
        doc_id = parse_id(document_id)
        if doc_id is None:
            return False
        result = self.collection.delete_one({'_id': doc_id})
        return result.deleted_count > 0

    def count(self, query: Dict[str, Any] = None) -> int:
        return self.collection.count_documents(query or {})
