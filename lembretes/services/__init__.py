"""
Services do app lembretes.

Localização: lembretes/services/

Services contêm a lógica de negócio da aplicação.
Eles:
- Orquestram chamadas a repositories
- Aplicam regras de negócio
- Validam dados

NÃO devem acessar diretamente o MongoDB, apenas via repositories.
"""
from .lembrete_service import LembreteService
from .categoria_service import CategoriaService

__all__ = ['LembreteService', 'CategoriaService']
