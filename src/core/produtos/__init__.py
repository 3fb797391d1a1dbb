"""
Domínio de Produtos - Itens vendáveis do cardápio.

Este módulo contém a lógica de negócio de produtos:
- Entidade (ProdutoEntity)
- Use Cases (Criar, Obter, Atualizar, Listar, Buscar, Remover)
- DTOs (Input/Output)
- Ports (Interface de repositório)

Características do Domínio:
- Associação opcional com categoria, verificada na escrita
- Busca por nome sem diferenciar maiúsculas/minúsculas
"""

from .entities import ProdutoEntity
from .dtos import ProdutoInputDTO, ProdutoOutputDTO
from .ports import ProdutoRepository, InMemoryProdutoRepository
from .use_cases import (
    CriarProdutoService,
    ObterProdutoService,
    AtualizarProdutoService,
    ListarProdutosService,
    ListarProdutosPorCategoriaService,
    BuscarProdutosPorNomeService,
    RemoverProdutoService,
)

__all__ = [
    "ProdutoEntity",
    "ProdutoInputDTO",
    "ProdutoOutputDTO",
    "ProdutoRepository",
    "InMemoryProdutoRepository",
    "CriarProdutoService",
    "ObterProdutoService",
    "AtualizarProdutoService",
    "ListarProdutosService",
    "ListarProdutosPorCategoriaService",
    "BuscarProdutosPorNomeService",
    "RemoverProdutoService",
]
