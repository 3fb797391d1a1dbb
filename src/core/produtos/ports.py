"""
Ports (Interfaces) do Domínio de Produtos.

Define o contrato que os Adapters de infraestrutura devem implementar
para persistência e consulta de produtos.
"""

from dataclasses import replace
from datetime import datetime
from typing import Dict, List, Optional, Protocol, runtime_checkable
import uuid

from src.core.shared.exceptions import RepositoryError
from src.core.shared.interfaces import Repository

from .entities import ProdutoEntity


@runtime_checkable
class ProdutoRepository(Repository[ProdutoEntity], Protocol):
    """
    Interface para persistência de Produtos.

    Implementações:
    - DjangoProdutoRepository (PostgreSQL via ORM)
    - InMemoryProdutoRepository (para testes)

    Methods:
        save: Cria produto (id atribuído pelo armazenamento)
        get_by_id: Busca por ID
        list_all: Lista todos
        list_by_categoria: Filtra por categoria
        search_by_nome: Busca por trecho do nome (sem diferenciar maiúsculas)
        update: Substitui campos mutáveis
        delete: Remove e retorna o produto removido
    """

    def save(self, produto: ProdutoEntity) -> ProdutoEntity:
        ...

    def get_by_id(self, produto_id: str) -> Optional[ProdutoEntity]:
        ...

    def list_all(self) -> List[ProdutoEntity]:
        ...

    def list_by_categoria(self, categoria_id: str) -> List[ProdutoEntity]:
        """
        Lista produtos de uma categoria.

        Returns:
            Lista (possivelmente vazia)
        """
        ...

    def search_by_nome(self, nome: str) -> List[ProdutoEntity]:
        """
        Busca produtos cujo nome contém o trecho informado.

        Comparação sem diferenciar maiúsculas/minúsculas.
        """
        ...

    def update(self, produto_id: str, produto: ProdutoEntity) -> ProdutoEntity:
        """
        Raises:
            RepositoryError: Se produto não existe
        """
        ...

    def delete(self, produto_id: str) -> ProdutoEntity:
        """
        Raises:
            RepositoryError: Se produto não existe
        """
        ...


class InMemoryProdutoRepository:
    """
    Implementação em memória do ProdutoRepository.

    Não usar em produção!
    """

    def __init__(self):
        self._produtos: Dict[str, ProdutoEntity] = {}

    def save(self, produto: ProdutoEntity) -> ProdutoEntity:
        """Salva produto em memória, gerando id."""
        agora = datetime.now()
        salvo = replace(
            produto,
            id=str(uuid.uuid4()),
            criado_em=agora,
            atualizado_em=agora,
        )
        self._produtos[salvo.id] = salvo
        return salvo

    def get_by_id(self, produto_id: str) -> Optional[ProdutoEntity]:
        return self._produtos.get(produto_id)

    def list_all(self) -> List[ProdutoEntity]:
        return list(self._produtos.values())

    def list_by_categoria(self, categoria_id: str) -> List[ProdutoEntity]:
        """Filtra por categoria."""
        return [p for p in self._produtos.values() if p.categoria_id == categoria_id]

    def search_by_nome(self, nome: str) -> List[ProdutoEntity]:
        """Filtra por trecho do nome."""
        trecho = nome.casefold()
        return [
            p for p in self._produtos.values()
            if p.nome and trecho in p.nome.casefold()
        ]

    def update(self, produto_id: str, produto: ProdutoEntity) -> ProdutoEntity:
        """Substitui campos mutáveis."""
        atual = self._get_or_fail(produto_id)
        campos = {nome: getattr(produto, nome) for nome in ProdutoEntity.CAMPOS_MUTAVEIS}
        atualizado = replace(atual, atualizado_em=datetime.now(), **campos)
        self._produtos[produto_id] = atualizado
        return atualizado

    def delete(self, produto_id: str) -> ProdutoEntity:
        removido = self._get_or_fail(produto_id)
        del self._produtos[produto_id]
        return removido

    def desassociar_categoria(self, categoria_id: str) -> None:
        """Limpa categoria_id dos produtos da categoria removida."""
        for produto in self.list_by_categoria(categoria_id):
            self._produtos[produto.id] = replace(produto, categoria_id=None, categoria=None)

    def exists(self, produto_id: str) -> bool:
        return produto_id in self._produtos

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._produtos.clear()

    def _get_or_fail(self, produto_id: str) -> ProdutoEntity:
        try:
            return self._produtos[produto_id]
        except KeyError:
            raise RepositoryError(
                f"Registro de produto {produto_id} não existe",
                entity_type="Produto",
                entity_id=produto_id,
            )
