"""
Ports (Interfaces) do Domínio de Categorias.

Define o contrato que os Adapters de infraestrutura devem implementar
para persistência de categorias.

Princípio:
    Core define interfaces → Adapters implementam
    Dependências sempre apontam para o Core
"""

from dataclasses import replace
from datetime import datetime
from typing import Dict, List, Optional, Protocol, runtime_checkable
import uuid

from src.core.shared.exceptions import RepositoryError
from src.core.shared.interfaces import Repository

from .entities import CategoriaEntity


@runtime_checkable
class CategoriaRepository(Repository[CategoriaEntity], Protocol):
    """
    Interface para persistência de Categorias.

    Implementações:
    - DjangoCategoriaRepository (PostgreSQL via ORM)
    - InMemoryCategoriaRepository (para testes)

    Methods:
        save: Cria categoria (id atribuído pelo armazenamento)
        get_by_id: Busca por ID
        list_all: Lista todas
        update: Substitui nome e tipo
        delete: Remove e retorna a categoria removida
    """

    def save(self, categoria: CategoriaEntity) -> CategoriaEntity:
        """
        Persiste nova categoria.

        Args:
            categoria: Entidade ainda sem id

        Returns:
            Categoria persistida com id e timestamps
        """
        ...

    def get_by_id(self, categoria_id: str) -> Optional[CategoriaEntity]:
        """
        Busca categoria por ID.

        Returns:
            Entidade encontrada ou None se não existir
        """
        ...

    def list_all(self) -> List[CategoriaEntity]:
        """
        Lista todas as categorias na ordem de criação.

        Returns:
            Lista (possivelmente vazia)
        """
        ...

    def update(self, categoria_id: str, categoria: CategoriaEntity) -> CategoriaEntity:
        """
        Atualiza nome e tipo da categoria.

        Raises:
            RepositoryError: Se categoria não existe
        """
        ...

    def delete(self, categoria_id: str) -> CategoriaEntity:
        """
        Remove categoria.

        Returns:
            Categoria removida

        Raises:
            RepositoryError: Se categoria não existe
        """
        ...


class InMemoryCategoriaRepository:
    """
    Implementação em memória do CategoriaRepository.

    Útil para:
    - Testes unitários
    - Prototipagem

    Não usar em produção!

    Se receber o repositório de produtos, a remoção de uma categoria
    desassocia os produtos dela, como o SET_NULL da chave estrangeira
    no adapter Django.

    Example:
        repo = InMemoryCategoriaRepository()
        salva = repo.save(CategoriaEntity.criar("Bebidas", CategoriaTipo.BEBIDA))
        found = repo.get_by_id(salva.id)
    """

    def __init__(self, produto_repo=None):
        self._categorias: Dict[str, CategoriaEntity] = {}
        self._produto_repo = produto_repo

    def save(self, categoria: CategoriaEntity) -> CategoriaEntity:
        """Salva categoria em memória, gerando id."""
        agora = datetime.now()
        salva = replace(
            categoria,
            id=str(uuid.uuid4()),
            criado_em=agora,
            atualizado_em=agora,
        )
        self._categorias[salva.id] = salva
        return salva

    def get_by_id(self, categoria_id: str) -> Optional[CategoriaEntity]:
        """Busca categoria por ID."""
        return self._categorias.get(categoria_id)

    def list_all(self) -> List[CategoriaEntity]:
        """Lista todas as categorias."""
        return list(self._categorias.values())

    def update(self, categoria_id: str, categoria: CategoriaEntity) -> CategoriaEntity:
        """Substitui nome e tipo."""
        atual = self._get_or_fail(categoria_id)
        atualizada = replace(
            atual,
            nome=categoria.nome,
            tipo=categoria.tipo,
            atualizado_em=datetime.now(),
        )
        self._categorias[categoria_id] = atualizada
        return atualizada

    def delete(self, categoria_id: str) -> CategoriaEntity:
        """Remove categoria e desassocia seus produtos."""
        removida = self._get_or_fail(categoria_id)
        del self._categorias[categoria_id]
        if self._produto_repo is not None:
            self._produto_repo.desassociar_categoria(categoria_id)
        return removida

    def exists(self, categoria_id: str) -> bool:
        """Verifica existência."""
        return categoria_id in self._categorias

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._categorias.clear()

    def _get_or_fail(self, categoria_id: str) -> CategoriaEntity:
        try:
            return self._categorias[categoria_id]
        except KeyError:
            raise RepositoryError(
                f"Registro de categoria {categoria_id} não existe",
                entity_type="Categoria",
                entity_id=categoria_id,
            )
