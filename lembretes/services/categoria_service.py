"""
Service para gerenciar categorias.

Localização: lembretes/services/categoria_service.py
"""
from typing import List, Dict, Any, Optional
import logging
from lembretes.repositories.categoria_repository import CategoriaRepository
from lembretes.repositories.lembrete_repository import LembreteRepository
from lembretes.models.categoria_model import CategoriaModel

logger = logging.getLogger(__name__)


class CategoriaService:
    """
    Service para gerenciar categorias.
    """

    def __init__(self, categoria_repo: Optional[CategoriaRepository] = None,
                 lembrete_repo: Optional[LembreteRepository] = None):
        self.categoria_repo = categoria_repo or CategoriaRepository()
        self._lembrete_repo = lembrete_repo

    @property
    def lembrete_repo(self) -> LembreteRepository:
        if self._lembrete_repo is None:
            self._lembrete_repo = LembreteRepository()
        return self._lembrete_repo

    def create_categoria(self, nome: str, cor: Optional[str] = None) -> Dict[str, Any]:
        """
        Cria uma nova categoria.

        Args:
            nome: Nome da categoria
            cor: Cor no formato #rrggbb (opcional)

        Returns:
            Dict com dados da categoria criada

        Raises:
            ValueError: Se dados inválidos ou nome já existente
        """
        categoria_data = CategoriaModel.create_categoria_data(nome=nome, cor=cor)

        if self.categoria_repo.find_by_nome(categoria_data['nome']):
            raise ValueError(f"Categoria '{categoria_data['nome']}' já existe")

        return self.categoria_repo.create(categoria_data)

    def get_categorias(self) -> List[Dict[str, Any]]:
        return self.categoria_repo.find_all()

    def delete_categoria(self, categoria_id: Any) -> bool:
        """
        Deleta uma categoria e remove a referência dos lembretes.

        Returns:
            True se deletado com sucesso, False se não encontrada
        """
        categoria = self.categoria_repo.find_by_id(categoria_id)
        if not categoria:
            return False

        alterados = self.lembrete_repo.desvincular_categoria(categoria['_id'])
        logger.info(
            f"[CATEGORIAS] Categoria {categoria['_id']} excluída; "
            f"{alterados} lembrete(s) sem categoria"
        )
        return self.categoria_repo.delete(categoria['_id'])

    def popular_categorias_predefinidas(self) -> List[int]:
        """
        Cria as categorias sugeridas que ainda não existem.

        Returns:
            Lista de IDs das categorias criadas
        """
        novas = [
            CategoriaModel.create_categoria_data(nome=nome)
            for nome in CategoriaModel.get_categorias_predefinidas()
            if not self.categoria_repo.find_by_nome(nome)
        ]
        return self.categoria_repo.create_many(novas)
