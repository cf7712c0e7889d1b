"""
Services do core.

Localização: core/services/

Services compartilhados entre os apps (auditoria).
"""
from .audit_log_service import AuditLogService

__all__ = ['AuditLogService']
