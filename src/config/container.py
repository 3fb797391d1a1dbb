"""
Dependency Injection Container.

Configura e gerencia todas as dependências da aplicação.
Usa dependency-injector para lazy-loading e injeção automática.

Padrões:
- Singleton: Uma instância para toda app (repositories)
- Factory: Nova instância por chamada (services)

Os repositórios Django são importados sob demanda, para que o Core
e os testes unitários não precisem de Django configurado.
"""

from importlib import import_module
from typing import Optional

from dependency_injector import containers, providers

from src.core.categorias.ports import InMemoryCategoriaRepository
from src.core.categorias.use_cases import (
    AtualizarCategoriaService,
    CriarCategoriaService,
    ListarCategoriasService,
    ObterCategoriaService,
    RemoverCategoriaService,
)
from src.core.produtos.ports import InMemoryProdutoRepository
from src.core.produtos.use_cases import (
    AtualizarProdutoService,
    BuscarProdutosPorNomeService,
    CriarProdutoService,
    ListarProdutosPorCategoriaService,
    ListarProdutosService,
    ObterProdutoService,
    RemoverProdutoService,
)


def _lazy(path: str, name: str):
    """Retorna callable que importa e instancia `path.name` quando chamado."""
    def factory():
        return getattr(import_module(path), name)()
    return factory


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organização:
    - Repositories: Persistência
    - Services: Use Cases

    Example:
        from src.config.container import Container

        container = Container()
        service = container.criar_categoria_service()
        output = service.execute(input_dto)
    """

    # =========================================================================
    # Repositories (Singleton - uma instância por app)
    # =========================================================================

    categoria_repository = providers.Singleton(
        _lazy('src.adapters.django_app.categorias.repositories', 'DjangoCategoriaRepository')
    )

    produto_repository = providers.Singleton(
        _lazy('src.adapters.django_app.produtos.repositories', 'DjangoProdutoRepository')
    )

    # =========================================================================
    # Services de Categoria
    # =========================================================================

    criar_categoria_service = providers.Factory(
        CriarCategoriaService,
        categoria_repo=categoria_repository,
    )

    obter_categoria_service = providers.Factory(
        ObterCategoriaService,
        categoria_repo=categoria_repository,
    )

    atualizar_categoria_service = providers.Factory(
        AtualizarCategoriaService,
        categoria_repo=categoria_repository,
        obter_categoria=obter_categoria_service,
    )

    listar_categorias_service = providers.Factory(
        ListarCategoriasService,
        categoria_repo=categoria_repository,
    )

    remover_categoria_service = providers.Factory(
        RemoverCategoriaService,
        categoria_repo=categoria_repository,
    )

    # =========================================================================
    # Services de Produto
    # =========================================================================

    obter_produto_service = providers.Factory(
        ObterProdutoService,
        produto_repo=produto_repository,
    )

    criar_produto_service = providers.Factory(
        CriarProdutoService,
        produto_repo=produto_repository,
        obter_categoria=obter_categoria_service,
    )

    atualizar_produto_service = providers.Factory(
        AtualizarProdutoService,
        produto_repo=produto_repository,
        obter_produto=obter_produto_service,
        obter_categoria=obter_categoria_service,
    )

    listar_produtos_service = providers.Factory(
        ListarProdutosService,
        produto_repo=produto_repository,
    )

    listar_produtos_por_categoria_service = providers.Factory(
        ListarProdutosPorCategoriaService,
        produto_repo=produto_repository,
    )

    buscar_produtos_por_nome_service = providers.Factory(
        BuscarProdutosPorNomeService,
        produto_repo=produto_repository,
    )

    remover_produto_service = providers.Factory(
        RemoverProdutoService,
        produto_repo=produto_repository,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir (lazy initialization).
    """
    global _container

    if _container is None:
        _container = Container()

    return _container


def reset_container() -> None:
    """
    Reset do container (para testes).
    """
    global _container
    _container = None


# =============================================================================
# Testing Container
# =============================================================================

def build_testing_container() -> Container:
    """
    Container com repositórios InMemory, sem banco.

    Example:
        container = build_testing_container()
        container.criar_categoria_service().execute(dto)
    """
    container = Container()
    container.produto_repository.override(
        providers.Singleton(InMemoryProdutoRepository)
    )
    # remoção de categoria desassocia produtos, como no banco
    container.categoria_repository.override(
        providers.Singleton(
            InMemoryCategoriaRepository,
            produto_repo=container.produto_repository,
        )
    )
    return container
