"""
Repository Base - Implementação base de repositórios com Django ORM.

Fornece as operações comuns aos repositórios do catálogo:
- save (id gerado pelo banco)
- get_by_id / list_all
- update / delete com erro de persistência quando o registro não existe

Princípios:
- Repositórios são stateless
- Não contêm lógica de negócio
- Apenas persistência e queries
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
import logging
import uuid

from django.db import models
from django.db.models import QuerySet

from src.core.shared.exceptions import RepositoryError

logger = logging.getLogger(__name__)

# Type variables
T = TypeVar("T")  # Entity type
M = TypeVar("M", bound=models.Model)  # Model type


def parse_uuid(value: Any) -> Optional[uuid.UUID]:
    """
    Converte identificador recebido em UUID.

    Returns:
        UUID ou None se o valor não for um UUID válido
    """
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        return None


class BaseRepository(ABC, Generic[T, M]):
    """
    Classe base abstrata para repositórios Django.

    Fornece implementação padrão para operações comuns,
    permitindo que repositórios específicos sobrescrevam
    apenas o necessário.

    Type Parameters:
        T: Tipo da entidade de domínio
        M: Tipo do Model Django

    Example:
        class DjangoCategoriaRepository(BaseRepository[CategoriaEntity, CategoriaModel]):
            model_class = CategoriaModel
            entity_name = "Categoria"

            def to_entity(self, model):
                return CategoriaMapper.to_entity(model)

            def to_model_fields(self, entity):
                return CategoriaMapper.to_model_fields(entity)
    """

    # Classe do model Django (definir na subclasse)
    model_class: Type[M]

    # Nome usado em logs e erros
    entity_name: str = "Entidade"

    # Campos para select_related (otimização N+1)
    select_related_fields: List[str] = []

    # Campo padrão de ordenação
    default_order_field: str = "criado_em"

    @abstractmethod
    def to_entity(self, model: M) -> T:
        """
        Converte Model Django para Entity de domínio.
        """
        raise NotImplementedError

    @abstractmethod
    def to_model_fields(self, entity: T) -> Dict[str, Any]:
        """
        Extrai da Entity os campos graváveis do Model.

        Não inclui id nem timestamps (gerados pelo banco).
        """
        raise NotImplementedError

    def _get_base_queryset(self) -> QuerySet:
        """
        Retorna queryset base com otimizações.
        """
        qs = self.model_class.objects.all()

        if self.select_related_fields:
            qs = qs.select_related(*self.select_related_fields)

        return qs

    def _find_model(self, entity_id: str) -> Optional[M]:
        pk = parse_uuid(entity_id)
        if pk is None:
            return None

        try:
            return self._get_base_queryset().get(pk=pk)
        except self.model_class.DoesNotExist:
            return None

    def _get_model_or_fail(self, entity_id: str) -> M:
        model = self._find_model(entity_id)

        if model is None:
            raise RepositoryError(
                f"Registro de {self.entity_name} {entity_id} não existe",
                entity_type=self.entity_name,
                entity_id=str(entity_id),
            )

        return model

    def save(self, entity: T) -> T:
        """
        Cria registro a partir da entidade.

        Args:
            entity: Entidade ainda sem id

        Returns:
            Entidade persistida (id e timestamps do banco)
        """
        model = self.model_class.objects.create(**self.to_model_fields(entity))

        logger.info(f"{self.entity_name} saved: {model.pk}")

        return self.to_entity(self._get_base_queryset().get(pk=model.pk))

    def get_by_id(self, entity_id: str) -> Optional[T]:
        """
        Busca entidade por ID.

        Returns:
            Entidade encontrada ou None (inclusive para ids malformados)
        """
        model = self._find_model(entity_id)

        if model is None:
            logger.debug(f"{self.entity_name} not found: {entity_id}")
            return None

        return self.to_entity(model)

    def list_all(self) -> List[T]:
        """
        Lista todas as entidades.

        Warning:
            Sem paginação.
        """
        models_ = self._get_base_queryset().order_by(self.default_order_field)
        return [self.to_entity(m) for m in models_]

    def update(self, entity_id: str, entity: T) -> T:
        """
        Substitui os campos graváveis do registro.

        Raises:
            RepositoryError: Se o registro não existe
        """
        model = self._get_model_or_fail(entity_id)

        for field_name, value in self.to_model_fields(entity).items():
            setattr(model, field_name, value)
        model.save()

        logger.info(f"{self.entity_name} updated: {entity_id}")

        return self.to_entity(self._get_base_queryset().get(pk=model.pk))

    def delete(self, entity_id: str) -> T:
        """
        Remove registro.

        Returns:
            Entidade removida

        Raises:
            RepositoryError: Se o registro não existe
        """
        model = self._get_model_or_fail(entity_id)
        entity = self.to_entity(model)

        model.delete()

        logger.info(f"{self.entity_name} deleted: {entity_id}")

        return entity

    def exists(self, entity_id: str) -> bool:
        pk = parse_uuid(entity_id)
        return pk is not None and self.model_class.objects.filter(pk=pk).exists()

    def count(self) -> int:
        return self.model_class.objects.count()
