"""
Interfaces (Ports) - Contratos entre Core e Adapters.

Este módulo define o contrato genérico de repositório que os
Adapters devem implementar. São os "Ports" da Arquitetura Hexagonal.

Princípio: Core define interfaces; Adapters implementam.
O fluxo de dependência sempre aponta para o Core.
"""

from typing import List, Optional, TypeVar, Generic, Protocol


# Type variable para entidades genéricas
T = TypeVar("T")


class Repository(Protocol, Generic[T]):
    """
    Interface genérica para repositórios (Storage Gateway).

    Define operações básicas de persistência que todos
    os repositórios devem implementar.

    Type Parameters:
        T: Tipo da entidade gerenciada pelo repositório

    Note:
        Usando Protocol para permitir duck typing.
        Adapters não precisam herdar explicitamente.
        Identificadores são atribuídos pelo armazenamento em save().
    """

    def save(self, entity: T) -> T:
        """
        Persiste nova entidade.

        Args:
            entity: Entidade ainda não persistida (id None)

        Returns:
            Entidade persistida, com id e timestamps preenchidos
        """
        ...

    def get_by_id(self, entity_id: str) -> Optional[T]:
        """
        Busca entidade por ID.

        Args:
            entity_id: Identificador único da entidade

        Returns:
            Entidade encontrada ou None
        """
        ...

    def list_all(self) -> List[T]:
        """
        Lista todas as entidades.

        Returns:
            Lista de todas as entidades do repositório
        """
        ...

    def update(self, entity_id: str, entity: T) -> T:
        """
        Substitui os campos mutáveis da entidade persistida.

        Args:
            entity_id: Identificador da entidade
            entity: Entidade com os novos valores

        Returns:
            Entidade persistida após a atualização

        Raises:
            RepositoryError: Se a entidade não existe
        """
        ...

    def delete(self, entity_id: str) -> T:
        """
        Remove entidade.

        Args:
            entity_id: Identificador da entidade a remover

        Returns:
            Entidade removida

        Raises:
            RepositoryError: Se a entidade não existe
        """
        ...
