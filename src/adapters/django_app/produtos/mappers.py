"""
Mappers para conversão entre ProdutoEntity (Core) e ProdutoModel (Django).
"""

from typing import Any, Dict, Iterable, List

from src.core.produtos.entities import ProdutoEntity
from src.adapters.django_app.categorias.mappers import CategoriaMapper

from .models import ProdutoModel


class ProdutoMapper:
    """
    Mapper para conversão entre ProdutoEntity e ProdutoModel.
    """

    @staticmethod
    def to_model_fields(entity: ProdutoEntity) -> Dict[str, Any]:
        """
        Campos graváveis do produto.

        A categoria é gravada pela coluna (categoria_id), sem carregar o model.
        """
        return {
            'nome': entity.nome,
            'categoria_id': entity.categoria_id or None,
            'tempo_preparo': entity.tempo_preparo,
            'preco': entity.preco,
            'descricao': entity.descricao,
            'imagem': entity.imagem,
        }

    @staticmethod
    def to_entity(model: ProdutoModel) -> ProdutoEntity:
        """
        Converte ProdutoModel para ProdutoEntity.

        Note:
            A categoria só é incluída se já veio carregada
            (select_related), evitando query extra.
        """
        categoria = None
        if model.categoria_id and ProdutoModel.categoria.is_cached(model):
            categoria = CategoriaMapper.to_entity(model.categoria)

        return ProdutoEntity(
            id=str(model.id),
            nome=model.nome,
            categoria_id=str(model.categoria_id) if model.categoria_id else None,
            tempo_preparo=model.tempo_preparo,
            preco=model.preco,
            descricao=model.descricao,
            imagem=model.imagem,
            criado_em=model.criado_em,
            atualizado_em=model.atualizado_em,
            categoria=categoria,
        )

    @staticmethod
    def to_entity_list(models: Iterable[ProdutoModel]) -> List[ProdutoEntity]:
        return [ProdutoMapper.to_entity(model) for model in models]
