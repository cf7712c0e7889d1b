"""
Repositories do app lembretes.

Localização: lembretes/repositories/

Cada repository representa uma collection do MongoDB.
"""
from .lembrete_repository import LembreteRepository
from .categoria_repository import CategoriaRepository

__all__ = ['LembreteRepository', 'CategoriaRepository']
