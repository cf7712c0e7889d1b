"""
Repositories do core.

Localização: core/repositories/

Repositories são a camada de acesso a dados (Data Access Layer).
Eles encapsulam todas as operações com MongoDB, isolando a lógica de acesso
a dados do resto da aplicação.

Estrutura:
- Cada repository representa uma collection do MongoDB
- IDs inteiros sequenciais (collection 'counters')
- Queries específicas do domínio
"""
from .base_repository import BaseRepository
from .audit_log_repository import AuditLogRepository

__all__ = ['BaseRepository', 'AuditLogRepository']
