"""
Decorator para auditoria e logging.

Localização: core/decorators/audit_log.py

Decorator para logar ações automaticamente.
"""
from functools import wraps
from typing import Callable
import logging
from pymongo.errors import PyMongoError
from core.repositories.base_repository import parse_id
from core.services.audit_log_service import AuditLogService

logger = logging.getLogger(__name__)

METODOS_LEITURA = ('GET', 'HEAD', 'OPTIONS')


def _registrar(func_log, **kwargs):
    # Falha ao gravar auditoria não pode derrubar a requisição
    try:
        func_log(**kwargs)
    except PyMongoError as e:
        logger.error(f"[AUDIT] Falha ao gravar log de auditoria: {e}")


def audit_log(entity: str, source: str = 'api', id_kwarg: str = None):
    """
    Decorator para logar ações de escrita automaticamente.

    Requisições GET/HEAD/OPTIONS não são auditadas. A ação é montada a
    partir do método HTTP (ex.: 'post_lembrete', 'delete_categoria').

    Args:
        entity: Entidade relacionada ('lembrete', 'categoria')
        source: Origem ('pagina', 'api')
        id_kwarg: Nome do kwarg da view que contém o ID da entidade

    Exemplo de uso:
        @audit_log(entity='lembrete', id_kwarg='lembrete_id')
        def lembrete_detail_api_view(request, lembrete_id):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(request, *args, **kwargs):
            if request.method in METODOS_LEITURA:
                return func(request, *args, **kwargs)

            audit_service = AuditLogService()
            action = f"{request.method.lower()}_{entity}"
            entity_id = parse_id(kwargs.get(id_kwarg)) if id_kwarg else None
            payload = {'path': request.path}

            try:
                response = func(request, *args, **kwargs)
            except Exception as e:
                _registrar(
                    audit_service.log_error,
                    action=action,
                    entity=entity,
                    error=e,
                    source=source,
                    entity_id=entity_id,
                    payload=payload
                )
                raise

            status_code = getattr(response, 'status_code', 200)
            payload['status_code'] = status_code
            _registrar(
                audit_service.log_action,
                action=action,
                entity=entity,
                entity_id=entity_id,
                source=source,
                status='success' if status_code < 400 else 'error',
                payload=payload
            )
            return response

        return wrapper
    return decorator
