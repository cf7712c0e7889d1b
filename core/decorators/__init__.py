"""
Decorators do core.

Localização: core/decorators/

Decorators para auditoria das views.
"""
from .audit_log import audit_log
