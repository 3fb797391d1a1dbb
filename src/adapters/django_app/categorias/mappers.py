"""
Mappers para conversão entre CategoriaEntity (Core) e CategoriaModel (Django).

Princípios:
- Mappers são stateless
- Não contêm lógica de negócio
- Tratam apenas conversão de dados
"""

from typing import Any, Dict, Iterable, List

from src.core.categorias.entities import CategoriaEntity, CategoriaTipo

from .models import CategoriaModel


class CategoriaMapper:
    """
    Mapper para conversão entre CategoriaEntity e CategoriaModel.

    Responsável por:
    - to_model_fields(): Entity → campos graváveis
    - to_entity(): Model → Entity
    - to_entity_list(): List[Model] → List[Entity]
    """

    @staticmethod
    def to_model_fields(entity: CategoriaEntity) -> Dict[str, Any]:
        """
        Campos graváveis da categoria.

        id e timestamps ficam a cargo do banco.
        """
        return {
            'nome': entity.nome,
            'tipo': entity.tipo.value,
        }

    @staticmethod
    def to_entity(model: CategoriaModel) -> CategoriaEntity:
        """
        Converte CategoriaModel para CategoriaEntity.

        Note:
            Bypassa o factory method .criar() pois os dados já
            foram validados na criação original
        """
        return CategoriaEntity(
            id=str(model.id),
            nome=model.nome,
            tipo=CategoriaTipo(model.tipo),
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
        )

    @staticmethod
    def to_entity_list(models: Iterable[CategoriaModel]) -> List[CategoriaEntity]:
        return [CategoriaMapper.to_entity(model) for model in models]
