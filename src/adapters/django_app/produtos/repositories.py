"""
Repositório Django para persistência de Produtos.

Implementa a interface (Port) definida no Core.
É um DRIVEN ADAPTER - acionado pelo Core em resposta a operações.
"""

from typing import Any, Dict, List
import logging

from src.core.produtos.entities import ProdutoEntity
from src.core.produtos.ports import ProdutoRepository as ProdutoRepositoryPort

from ..shared.repository import BaseRepository, parse_uuid
from .models import ProdutoModel
from .mappers import ProdutoMapper

logger = logging.getLogger(__name__)


class DjangoProdutoRepository(BaseRepository[ProdutoEntity, ProdutoModel], ProdutoRepositoryPort):
    """
    Implementação Django do ProdutoRepository.

    Produtos são sempre carregados com a categoria (select_related),
    que vai junto na entidade retornada.
    """

    model_class = ProdutoModel
    entity_name = "Produto"
    select_related_fields = ['categoria']

    def to_entity(self, model: ProdutoModel) -> ProdutoEntity:
        return ProdutoMapper.to_entity(model)

    def to_model_fields(self, entity: ProdutoEntity) -> Dict[str, Any]:
        return ProdutoMapper.to_model_fields(entity)

    def list_by_categoria(self, categoria_id: str) -> List[ProdutoEntity]:
        """
        Lista produtos associados à categoria.

        Returns:
            Lista de produtos (vazia se id malformado ou sem produtos)
        """
        pk = parse_uuid(categoria_id)
        if pk is None:
            logger.debug(f"categoria_id inválido na listagem: {categoria_id}")
            return []

        models_ = (
            self._get_base_queryset()
            .filter(categoria_id=pk)
            .order_by(self.default_order_field)
        )
        return ProdutoMapper.to_entity_list(models_)

    def search_by_nome(self, nome: str) -> List[ProdutoEntity]:
        """
        Busca produtos cujo nome contém o trecho (case-insensitive).
        """
        models_ = (
            self._get_base_queryset()
            .filter(nome__icontains=nome)
            .order_by(self.default_order_field)
        )
        return ProdutoMapper.to_entity_list(models_)
