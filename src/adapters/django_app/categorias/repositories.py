"""
Repositório Django para persistência de Categorias.

Implementa a interface (Port) definida no Core.
É um DRIVEN ADAPTER - acionado pelo Core em resposta a operações.
"""

from typing import Any, Dict
import logging

from src.core.categorias.entities import CategoriaEntity
from src.core.categorias.ports import CategoriaRepository as CategoriaRepositoryPort

from ..shared.repository import BaseRepository
from .models import CategoriaModel
from .mappers import CategoriaMapper

logger = logging.getLogger(__name__)


class DjangoCategoriaRepository(BaseRepository[CategoriaEntity, CategoriaModel], CategoriaRepositoryPort):
    """
    Implementação Django do CategoriaRepository.

    Example:
        repo = DjangoCategoriaRepository()
        salva = repo.save(CategoriaEntity.criar("Bebidas", CategoriaTipo.BEBIDA))
        repo.get_by_id(salva.id)
    """

    model_class = CategoriaModel
    entity_name = "Categoria"

    def to_entity(self, model: CategoriaModel) -> CategoriaEntity:
        return CategoriaMapper.to_entity(model)

    def to_model_fields(self, entity: CategoriaEntity) -> Dict[str, Any]:
        return CategoriaMapper.to_model_fields(entity)
