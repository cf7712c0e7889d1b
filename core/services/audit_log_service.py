"""
Service para logs de auditoria.

Localização: core/services/audit_log_service.py

Este service grava os logs de auditoria.
"""
from typing import Optional, Dict, Any
import traceback
from core.repositories.audit_log_repository import AuditLogRepository


class AuditLogService:
    """
    Service para gerenciar logs de auditoria.

    Exemplo de uso:
        service = AuditLogService()
        service.log_action(
            action='post_lembrete',
            entity='lembrete',
            entity_id=1,
            source='api',
            status='success'
        )
    """

    MAX_ERROR_LENGTH = 500

    def __init__(self, audit_repo: Optional[AuditLogRepository] = None):
        self.audit_repo = audit_repo or AuditLogRepository()

    def log_action(self, action: str, entity: str,
                   source: str = 'pagina', status: str = 'success',
                   entity_id: Optional[int] = None, payload: Optional[Dict[str, Any]] = None,
                   error: Optional[Any] = None) -> Dict[str, Any]:
        """
        Registra uma ação no log de auditoria.

        Args:
            action: Tipo de ação ('post_lembrete', 'put_lembrete', 'error')
            entity: Entidade relacionada ('lembrete', 'categoria', 'system')
            source: Origem da ação ('pagina', 'api')
            status: Status da ação ('success', 'error')
            entity_id: ID da entidade (opcional)
            payload: Dados adicionais (opcional)
            error: Mensagem de erro ou exception (opcional)

        Returns:
            Dict com dados do log criado
        """
        log_data = {
            'action': action,
            'entity': entity,
            'source': source,
            'status': status,
        }

        if entity_id is not None:
            log_data['entity_id'] = entity_id

        if payload:
            log_data['payload'] = payload

        if error:
            log_data['error'] = self._format_error(error)

        return self.audit_repo.create(log_data)

    def log_error(self, action: str, entity: str, error: Any,
                  source: str = 'pagina', entity_id: Optional[int] = None,
                  payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Registra um erro. A ação original vai no payload.
        """
        return self.log_action(
            action='error',
            entity=entity,
            entity_id=entity_id,
            source=source,
            status='error',
            payload={'failed_action': action, **(payload or {})},
            error=error
        )

    def _format_error(self, error: Any) -> str:
        """
        Formata erro para armazenamento (stacktrace resumido).
        """
        if isinstance(error, BaseException):
            # Apenas as últimas 3 linhas do stacktrace
            tb_lines = traceback.format_exception(type(error), error, error.__traceback__)
            error_str = ''.join(tb_lines[-3:])
        else:
            error_str = str(error)

        if len(error_str) > self.MAX_ERROR_LENGTH:
            error_str = error_str[:self.MAX_ERROR_LENGTH - 3] + '...'
        return error_str
