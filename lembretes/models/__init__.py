"""
Modelos do app lembretes.

Localização: lembretes/models/

Não são models do Django ORM: descrevem o schema dos documentos
no MongoDB e montam/serializam os dicts.
"""
from .lembrete_model import LembreteModel
from .categoria_model import CategoriaModel

__all__ = ['LembreteModel', 'CategoriaModel']
