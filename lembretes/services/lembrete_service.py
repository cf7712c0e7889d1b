"""
Service para lembretes.

Localização: lembretes/services/lembrete_service.py

Lógica de negócio para gerenciamento de lembretes.
"""
from typing import List, Dict, Any, Optional
import logging
from lembretes.models.lembrete_model import LembreteModel
from lembretes.repositories.lembrete_repository import LembreteRepository
from lembretes.repositories.categoria_repository import CategoriaRepository
from lembretes.sugestoes import gerar_sugestoes
from core.repositories.base_repository import parse_id

logger = logging.getLogger(__name__)

CAMPOS_EDITAVEIS = ('texto', 'data', 'prioridade', 'concluido', 'categoria_id', 'descricao')


class LembreteService:
    """
    Service para gerenciar lembretes.
    """

    def __init__(self, repository: Optional[LembreteRepository] = None,
                 categoria_repo: Optional[CategoriaRepository] = None):
        self.repository = repository or LembreteRepository()
        self._categoria_repo = categoria_repo

    @property
    def categoria_repo(self) -> CategoriaRepository:
        if self._categoria_repo is None:
            self._categoria_repo = CategoriaRepository()
        return self._categoria_repo

    def _validar_categoria(self, categoria_id: Any) -> Optional[int]:
        """
        Valida a referência de categoria (vazio = sem categoria).

        Raises:
            ValueError: Se a categoria não existir
        """
        if categoria_id is None or categoria_id == '':
            return None

        cat_id = parse_id(categoria_id)
        if cat_id is None or not self.categoria_repo.find_by_id(cat_id):
            raise ValueError("Categoria não encontrada")
        return cat_id

    def criar_lembrete(self, texto: str, data: Any, prioridade: Any = 0,
                       categoria_id: Any = None, descricao: Optional[str] = None) -> Dict[str, Any]:
        """
        Cria um novo lembrete.

        Args:
            texto: Texto do lembrete
            data: Data em dd/mm/aaaa ou ISO (YYYY-MM-DD)
            prioridade: 0, 1 ou 2 (default 0)
            categoria_id: ID da categoria (opcional)
            descricao: Descrição longa (opcional)

        Returns:
            Dict com o lembrete criado

        Raises:
            ValueError: Se dados inválidos
        """
        if not texto or not str(texto).strip() or not data:
            raise ValueError("Texto e data são obrigatórios")

        lembrete_data = LembreteModel.create_lembrete_data(
            texto=texto,
            data=data,
            prioridade=prioridade,
            categoria_id=self._validar_categoria(categoria_id),
            descricao=descricao
        )

        lembrete = self.repository.create(lembrete_data)
        logger.info(f"[LEMBRETES] Lembrete {lembrete['_id']} criado")
        return lembrete

    def listar_lembretes(self, concluido: Optional[bool] = None,
                         prioridade: Optional[int] = None,
                         categoria_id: Optional[int] = None) -> List[Dict[str, Any]]:
        """
        Lista lembretes ordenados por data.
        """
        if prioridade is not None:
            prioridade = LembreteModel.validar_prioridade(prioridade)
        if categoria_id is not None:
            categoria_id = parse_id(categoria_id)
            if categoria_id is None:
                raise ValueError("Categoria inválida")

        return self.repository.find_all(
            concluido=concluido,
            prioridade=prioridade,
            categoria_id=categoria_id
        )

    def obter_lembrete(self, lembrete_id: Any) -> Optional[Dict[str, Any]]:
        return self.repository.find_by_id(lembrete_id)

    def atualizar_lembrete(self, lembrete_id: Any,
                           campos: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Atualiza um lembrete. Apenas os campos informados são alterados.

        Args:
            lembrete_id: ID do lembrete
            campos: Dict com texto, data, prioridade, concluido, categoria_id
                e/ou descricao. Outras chaves são ignoradas.

        Returns:
            Lembrete atualizado ou None se não encontrado

        Raises:
            ValueError: Se algum campo for inválido
        """
        lembrete = self.repository.find_by_id(lembrete_id)
        if not lembrete:
            return None

        update_data = {}
        for campo, valor in campos.items():
            if campo not in CAMPOS_EDITAVEIS:
                continue
            if campo == 'texto':
                update_data['texto'] = LembreteModel.validar_texto(valor)
            elif campo == 'data':
                if not valor:
                    raise ValueError("Data é obrigatória")
                update_data['data'] = LembreteModel.data_para_datetime(valor)
            elif campo == 'prioridade':
                update_data['prioridade'] = LembreteModel.validar_prioridade(valor)
            elif campo == 'concluido':
                update_data['concluido'] = LembreteModel.validar_concluido(valor)
            elif campo == 'categoria_id':
                update_data['categoria_id'] = self._validar_categoria(valor)
            elif campo == 'descricao':
                update_data['descricao'] = LembreteModel.validar_descricao(valor or None)

        if not update_data:
            return lembrete

        atualizado = self.repository.update(lembrete['_id'], update_data)
        logger.info(f"[LEMBRETES] Lembrete {lembrete['_id']} atualizado: {sorted(update_data)}")
        return atualizado

    def alternar_concluido(self, lembrete_id: Any) -> Optional[Dict[str, Any]]:
        """
        Marca/desmarca o lembrete como concluído.
        """
        lembrete = self.repository.find_by_id(lembrete_id)
        if not lembrete:
            return None
        return self.repository.update(
            lembrete['_id'],
            {'concluido': not lembrete.get('concluido', False)}
        )

    def excluir_lembrete(self, lembrete_id: Any) -> bool:
        """
        Exclui um lembrete.

        Returns:
            True se excluído, False se não encontrado
        """
        excluido = self.repository.delete(lembrete_id)
        if excluido:
            logger.info(f"[LEMBRETES] Lembrete {lembrete_id} excluído")
        return excluido

    def sugerir_textos(self, texto_atual: str, rng=None) -> List[str]:
        """
        Sugestões para o campo de texto usando os lembretes salvos como histórico.
        """
        historico = self.repository.find_textos()
        return gerar_sugestoes(historico, texto_atual or '', rng=rng)
