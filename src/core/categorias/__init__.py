"""
Domínio de Categorias - Agrupamentos do cardápio.

Este módulo contém a lógica de negócio de categorias:
- Entidades (CategoriaEntity, CategoriaTipo)
- Validador de tipo (validar_tipo_categoria)
- Use Cases (Criar, Obter, Atualizar, Listar, Remover)
- DTOs (Input/Output)
- Ports (Interface de repositório)
"""

from .entities import CategoriaEntity, CategoriaTipo, validar_tipo_categoria
from .dtos import (
    CriarCategoriaInputDTO,
    AtualizarCategoriaInputDTO,
    CategoriaOutputDTO,
)
from .ports import CategoriaRepository, InMemoryCategoriaRepository
from .use_cases import (
    CriarCategoriaService,
    ObterCategoriaService,
    AtualizarCategoriaService,
    ListarCategoriasService,
    RemoverCategoriaService,
)

__all__ = [
    # Entities
    "CategoriaEntity",
    "CategoriaTipo",
    "validar_tipo_categoria",
    # DTOs
    "CriarCategoriaInputDTO",
    "AtualizarCategoriaInputDTO",
    "CategoriaOutputDTO",
    # Ports
    "CategoriaRepository",
    "InMemoryCategoriaRepository",
    # Use Cases
    "CriarCategoriaService",
    "ObterCategoriaService",
    "AtualizarCategoriaService",
    "ListarCategoriasService",
    "RemoverCategoriaService",
]
