"""
Repository para logs de auditoria no MongoDB.

Localização: core/repositories/audit_log_repository.py

Schema da collection audit_logs:
{
  _id: Int,
  action: String,              // 'post_lembrete', 'delete_categoria', 'error'
  entity: String,              // 'lembrete', 'categoria', 'system'
  entity_id: Int,              // ID da entidade (opcional)
  payload: Object,             // Dados adicionais
  source: String,              // 'pagina', 'api'
  status: String,              // 'success', 'error'
  error: String,               // Stacktrace resumido (se status = 'error')
  created_at: ISODate
}
"""
from core.repositories.base_repository import BaseRepository


class AuditLogRepository(BaseRepository):
    """
    Repository para gerenciar logs de auditoria no MongoDB.

    Exemplo de uso:
        repo = AuditLogRepository()
        log = repo.create({
            'action': 'post_lembrete',
            'entity': 'lembrete',
            'source': 'api',
            'status': 'success'
        })
    """

    def __init__(self):
        super().__init__('audit_logs')

    def _ensure_indexes(self):
        """
        Cria índices necessários para otimizar queries de auditoria.
        """
        self.collection.create_index('action')
        self.collection.create_index('status')
        self.collection.create_index([('entity', 1), ('entity_id', 1)])
        self.collection.create_index('created_at')
