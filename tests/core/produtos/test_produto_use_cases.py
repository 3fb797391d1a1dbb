"""
Testes Unitários para Use Cases do Domínio de Produtos.

Estratégia de Teste:
- Usa InMemory repositories para isolamento
- Usa Mock no ObterCategoriaService para verificar quando a
  categoria é (ou não) consultada
"""

import pytest
from decimal import Decimal
from unittest.mock import Mock

from src.core.categorias.use_cases import ObterCategoriaService
from src.core.produtos.dtos import ProdutoInputDTO
from src.core.produtos.use_cases import (
    AtualizarProdutoService,
    BuscarProdutosPorNomeService,
    CriarProdutoService,
    ListarProdutosPorCategoriaService,
    ListarProdutosService,
    ObterProdutoService,
    RemoverProdutoService,
)
from src.core.shared.exceptions import (
    RepositoryError,
    ValidationErrorType,
    ValidationException,
)


# =============================================================================
# CriarProdutoService
# =============================================================================

class TestCriarProdutoService:

    def test_criar_com_categoria(self, produto_repo, obter_categoria, categoria_bebida):
        service = CriarProdutoService(produto_repo, obter_categoria)

        output = service.execute(ProdutoInputDTO(
            nome="Coca-Cola",
            categoria_id=categoria_bebida.id,
            tempo_preparo=5,
            preco=Decimal("5.50"),
        ))

        assert output.id is not None
        assert output.categoria_id == categoria_bebida.id
        assert output.preco == Decimal("5.50")

    def test_categoria_inexistente(self, produto_repo, obter_categoria):
        service = CriarProdutoService(produto_repo, obter_categoria)

        with pytest.raises(ValidationException) as exc_info:
            service.execute(ProdutoInputDTO(nome="Coca-Cola", categoria_id="nao-existe"))

        assert exc_info.value.type == ValidationErrorType.CATEGORIA_NOT_FOUND
        assert produto_repo.list_all() == []

    @pytest.mark.parametrize("categoria_id", [None, ""])
    def test_sem_categoria_nao_consulta(self, produto_repo, categoria_id):
        obter_categoria = Mock(spec=ObterCategoriaService)
        service = CriarProdutoService(produto_repo, obter_categoria)

        output = service.execute(ProdutoInputDTO(nome="Água", categoria_id=categoria_id))

        obter_categoria.get_entity.assert_not_called()
        assert output.categoria_id is None


# =============================================================================
# ObterProdutoService / ListarProdutosService
# =============================================================================

class TestObterProdutoService:

    def test_obter_existente(self, produto_repo, produto_coca):
        output = ObterProdutoService(produto_repo).execute(produto_coca.id)

        assert output.nome == "Coca-Cola"

    def test_obter_inexistente(self, produto_repo):
        with pytest.raises(ValidationException) as exc_info:
            ObterProdutoService(produto_repo).execute("nao-existe")

        assert exc_info.value.type == ValidationErrorType.PRODUTO_NOT_FOUND


class TestListarProdutosService:

    def test_lista_todos(self, produto_repo, produto_coca):
        output = ListarProdutosService(produto_repo).execute()

        assert [p.id for p in output] == [produto_coca.id]


# =============================================================================
# AtualizarProdutoService
# =============================================================================

class TestAtualizarProdutoService:

    @pytest.fixture
    def service(self, produto_repo, obter_categoria):
        return AtualizarProdutoService(
            produto_repo,
            ObterProdutoService(produto_repo),
            obter_categoria,
        )

    def test_atualizacao_parcial(self, service, produto_coca):
        output = service.execute(produto_coca.id, ProdutoInputDTO(preco=Decimal("6.00")))

        assert output.preco == Decimal("6.00")
        assert output.nome == "Coca-Cola"
        assert output.tempo_preparo == 5

    def test_categoria_vazia_mantem_persistida(self, service, produto_coca, categoria_bebida):
        output = service.execute(produto_coca.id, ProdutoInputDTO(nome="Coca Zero", categoria_id=""))

        assert output.nome == "Coca Zero"
        assert output.categoria_id == categoria_bebida.id

    def test_produto_inexistente_antes_da_categoria(self, service):
        with pytest.raises(ValidationException) as exc_info:
            service.execute("nao-existe", ProdutoInputDTO(categoria_id="tambem-nao"))

        assert exc_info.value.type == ValidationErrorType.PRODUTO_NOT_FOUND

    def test_categoria_inexistente(self, service, produto_coca):
        with pytest.raises(ValidationException) as exc_info:
            service.execute(produto_coca.id, ProdutoInputDTO(categoria_id="nao-existe"))

        assert exc_info.value.type == ValidationErrorType.CATEGORIA_NOT_FOUND

    def test_sem_categoria_nao_consulta(self, produto_repo, produto_coca):
        obter_categoria = Mock(spec=ObterCategoriaService)
        service = AtualizarProdutoService(
            produto_repo, ObterProdutoService(produto_repo), obter_categoria
        )

        service.execute(produto_coca.id, ProdutoInputDTO(nome="Coca Zero"))

        obter_categoria.get_entity.assert_not_called()


# =============================================================================
# Consultas por categoria e por nome
# =============================================================================

class TestListarProdutosPorCategoriaService:

    def test_lista_da_categoria(self, produto_repo, produto_coca, categoria_bebida):
        output = ListarProdutosPorCategoriaService(produto_repo).execute(categoria_bebida.id)

        assert [p.id for p in output] == [produto_coca.id]

    def test_vazio_e_not_found(self, produto_repo, categoria_bebida):
        with pytest.raises(ValidationException) as exc_info:
            ListarProdutosPorCategoriaService(produto_repo).execute(categoria_bebida.id)

        assert exc_info.value.type == ValidationErrorType.PRODUTO_NOT_FOUND


class TestBuscarProdutosPorNomeService:

    def test_busca_sem_diferenciar_maiusculas(self, produto_repo, produto_coca):
        output = BuscarProdutosPorNomeService(produto_repo).execute("coca")

        assert [p.id for p in output] == [produto_coca.id]

    def test_sem_resultado_retorna_lista_vazia(self, produto_repo, produto_coca):
        assert BuscarProdutosPorNomeService(produto_repo).execute("pizza") == []


# =============================================================================
# RemoverProdutoService
# =============================================================================

class TestRemoverProdutoService:

    def test_remover(self, produto_repo, produto_coca):
        output = RemoverProdutoService(produto_repo).execute(produto_coca.id)

        assert output.id == produto_coca.id
        assert not produto_repo.exists(produto_coca.id)

    def test_remover_inexistente(self, produto_repo):
        with pytest.raises(RepositoryError):
            RemoverProdutoService(produto_repo).execute("nao-existe")


# =============================================================================
# Cenário completo
# =============================================================================

class TestCenarioCardapio:
    """Categoria → produto → consulta por categoria → remoção da categoria."""

    def test_fluxo(self, categoria_repo, produto_repo, obter_categoria):
        from src.core.categorias.dtos import CriarCategoriaInputDTO
        from src.core.categorias.use_cases import CriarCategoriaService, RemoverCategoriaService

        categoria = CriarCategoriaService(categoria_repo).execute(
            CriarCategoriaInputDTO(nome="Bebidas", tipo="BEBIDA")
        )
        assert categoria.id is not None
        assert categoria.tipo == "BEBIDA"

        produto = CriarProdutoService(produto_repo, obter_categoria).execute(ProdutoInputDTO(
            nome="Coca-Cola",
            categoria_id=categoria.id,
            tempo_preparo=5,
            preco=Decimal("5.50"),
            descricao="Refrigerante lata 350ml",
            imagem="coca-cola.jpg",
        ))
        assert produto.nome == "Coca-Cola"
        assert produto.categoria_id == categoria.id
        assert produto.tempo_preparo == 5
        assert produto.preco == Decimal("5.50")
        assert produto.imagem == "coca-cola.jpg"

        listados = ListarProdutosPorCategoriaService(produto_repo).execute(categoria.id)
        assert [p.id for p in listados] == [produto.id]

        RemoverCategoriaService(categoria_repo).execute(categoria.id)

        with pytest.raises(ValidationException) as exc_info:
            obter_categoria.execute(categoria.id)
        assert exc_info.value.type == ValidationErrorType.CATEGORIA_NOT_FOUND
