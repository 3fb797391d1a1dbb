"""
Testes do Container de Dependency Injection.
"""

from dependency_injector import providers

from src.config.container import (
    Container,
    build_testing_container,
    get_container,
    reset_container,
)
from src.core.categorias.dtos import CriarCategoriaInputDTO
from src.core.categorias.ports import InMemoryCategoriaRepository
from src.core.categorias.use_cases import AtualizarCategoriaService, CriarCategoriaService
from src.core.produtos.dtos import ProdutoInputDTO
from src.core.produtos.ports import InMemoryProdutoRepository
from src.core.produtos.use_cases import AtualizarProdutoService, CriarProdutoService


class TestContainerGlobal:

    def test_get_container_retorna_mesma_instancia(self):
        assert get_container() is get_container()

    def test_reset_container(self):
        antes = get_container()
        reset_container()
        assert get_container() is not antes


class TestContainerWiring:

    def test_services_sao_factories(self):
        container = build_testing_container()

        assert container.criar_categoria_service() is not container.criar_categoria_service()

    def test_repositorios_sao_singletons(self):
        container = build_testing_container()

        assert container.categoria_repository() is container.categoria_repository()
        assert isinstance(container.categoria_repository(), InMemoryCategoriaRepository)
        assert isinstance(container.produto_repository(), InMemoryProdutoRepository)

    def test_dependencias_injetadas(self):
        container = build_testing_container()

        atualizar_categoria = container.atualizar_categoria_service()
        atualizar_produto = container.atualizar_produto_service()

        assert isinstance(atualizar_categoria, AtualizarCategoriaService)
        assert isinstance(atualizar_produto, AtualizarProdutoService)
        assert atualizar_produto.produto_repo is container.produto_repository()
        assert atualizar_produto.obter_categoria.categoria_repo is container.categoria_repository()

    def test_override_de_repositorio(self):
        container = Container()
        repo = InMemoryCategoriaRepository()
        container.categoria_repository.override(providers.Object(repo))

        service = container.criar_categoria_service()

        assert isinstance(service, CriarCategoriaService)
        assert service.categoria_repo is repo

    def test_fluxo_com_repositorios_em_memoria(self):
        container = build_testing_container()

        categoria = container.criar_categoria_service().execute(
            CriarCategoriaInputDTO(nome="Bebidas", tipo="BEBIDA")
        )
        produto = container.criar_produto_service().execute(
            ProdutoInputDTO(nome="Coca-Cola", categoria_id=categoria.id)
        )

        assert isinstance(container.criar_produto_service(), CriarProdutoService)
        listados = container.listar_produtos_por_categoria_service().execute(categoria.id)
        assert [p.id for p in listados] == [produto.id]

    def test_remover_categoria_desassocia_produtos(self):
        container = build_testing_container()

        categoria = container.criar_categoria_service().execute(
            CriarCategoriaInputDTO(nome="Bebidas", tipo="BEBIDA")
        )
        produto = container.criar_produto_service().execute(
            ProdutoInputDTO(nome="Coca-Cola", categoria_id=categoria.id)
        )

        container.remover_categoria_service().execute(categoria.id)

        restante = container.obter_produto_service().execute(produto.id)
        assert restante.categoria_id is None

    def test_container_sem_provider_de_configuracao(self):
        assert not hasattr(Container, 'config')
