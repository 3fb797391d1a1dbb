"""
Testes Unitários para Use Cases do Domínio de Categorias.

Estratégia de Teste:
- Usa InMemoryCategoriaRepository (fake) para isolamento
- Usa Mock para verificar que o repositório não é acionado
  quando a validação falha
"""

import pytest
from unittest.mock import Mock

from src.core.categorias.dtos import AtualizarCategoriaInputDTO, CriarCategoriaInputDTO
from src.core.categorias.entities import CategoriaEntity, CategoriaTipo
from src.core.categorias.use_cases import (
    AtualizarCategoriaService,
    CriarCategoriaService,
    ListarCategoriasService,
    ObterCategoriaService,
    RemoverCategoriaService,
)
from src.core.shared.exceptions import (
    RepositoryError,
    ValidationErrorType,
    ValidationException,
)


# =============================================================================
# CriarCategoriaService
# =============================================================================

class TestCriarCategoriaService:

    def test_criar_categoria(self, categoria_repo):
        service = CriarCategoriaService(categoria_repo)

        output = service.execute(CriarCategoriaInputDTO(nome="Bebidas", tipo="BEBIDA"))

        assert output.id is not None
        assert output.nome == "Bebidas"
        assert output.tipo == "BEBIDA"
        assert categoria_repo.exists(output.id)

    def test_tipo_invalido_nao_aciona_repositorio(self):
        repo = Mock()
        service = CriarCategoriaService(repo)

        with pytest.raises(ValidationException) as exc_info:
            service.execute(CriarCategoriaInputDTO(nome="Pizzas", tipo="PIZZA"))

        assert exc_info.value.type == ValidationErrorType.CATEGORIA_INVALID_TYPE
        repo.save.assert_not_called()

    @pytest.mark.parametrize("tipo", [None, "bebida", 1, " LANCHE"])
    def test_tipos_rejeitados(self, categoria_repo, tipo):
        service = CriarCategoriaService(categoria_repo)

        with pytest.raises(ValidationException) as exc_info:
            service.execute(CriarCategoriaInputDTO(nome="X", tipo=tipo))

        assert exc_info.value.type == ValidationErrorType.CATEGORIA_INVALID_TYPE
        assert categoria_repo.list_all() == []

    def test_erro_do_repositorio_propaga(self):
        repo = Mock()
        repo.save.side_effect = RepositoryError("banco indisponível")
        service = CriarCategoriaService(repo)

        with pytest.raises(RepositoryError):
            service.execute(CriarCategoriaInputDTO(nome="Bebidas", tipo="BEBIDA"))


# =============================================================================
# ObterCategoriaService / ListarCategoriasService
# =============================================================================

class TestObterCategoriaService:

    def test_obter_existente(self, categoria_repo, categoria_bebida):
        output = ObterCategoriaService(categoria_repo).execute(categoria_bebida.id)

        assert output.id == categoria_bebida.id
        assert output.tipo == "BEBIDA"

    def test_obter_inexistente(self, categoria_repo):
        with pytest.raises(ValidationException) as exc_info:
            ObterCategoriaService(categoria_repo).execute("nao-existe")

        assert exc_info.value.type == ValidationErrorType.CATEGORIA_NOT_FOUND
        assert exc_info.value.is_not_found


class TestListarCategoriasService:

    def test_lista_vazia(self, categoria_repo):
        assert ListarCategoriasService(categoria_repo).execute() == []

    def test_lista_todas(self, categoria_repo):
        criar = CriarCategoriaService(categoria_repo)
        criar.execute(CriarCategoriaInputDTO(nome="Bebidas", tipo="BEBIDA"))
        criar.execute(CriarCategoriaInputDTO(nome="Lanches", tipo="LANCHE"))

        output = ListarCategoriasService(categoria_repo).execute()

        assert [c.nome for c in output] == ["Bebidas", "Lanches"]


# =============================================================================
# AtualizarCategoriaService
# =============================================================================

class TestAtualizarCategoriaService:

    @pytest.fixture
    def service(self, categoria_repo, obter_categoria):
        return AtualizarCategoriaService(categoria_repo, obter_categoria)

    def test_atualizar_nome_e_tipo(self, service, categoria_bebida):
        output = service.execute(
            categoria_bebida.id,
            AtualizarCategoriaInputDTO(nome="Doces", tipo="SOBREMESA"),
        )

        assert output.nome == "Doces"
        assert output.tipo == "SOBREMESA"

    def test_nome_ausente_mantem_valor(self, service, categoria_bebida):
        output = service.execute(
            categoria_bebida.id,
            AtualizarCategoriaInputDTO(tipo="LANCHE"),
        )

        assert output.nome == "Bebidas"
        assert output.tipo == "LANCHE"

    def test_tipo_ausente_e_invalido(self, service, categoria_bebida):
        with pytest.raises(ValidationException) as exc_info:
            service.execute(categoria_bebida.id, AtualizarCategoriaInputDTO(nome="Outro"))

        assert exc_info.value.type == ValidationErrorType.CATEGORIA_INVALID_TYPE

    def test_inexistente_reportado_antes_do_tipo(self, service):
        with pytest.raises(ValidationException) as exc_info:
            service.execute("nao-existe", AtualizarCategoriaInputDTO(tipo="INVALIDO"))

        assert exc_info.value.type == ValidationErrorType.CATEGORIA_NOT_FOUND

    def test_tipo_invalido_nao_aciona_update(self, categoria_bebida):
        repo = Mock()
        repo.get_by_id.return_value = categoria_bebida
        service = AtualizarCategoriaService(repo, ObterCategoriaService(repo))

        with pytest.raises(ValidationException):
            service.execute(categoria_bebida.id, AtualizarCategoriaInputDTO(tipo="bebida"))

        repo.update.assert_not_called()


# =============================================================================
# RemoverCategoriaService
# =============================================================================

class TestRemoverCategoriaService:

    def test_remover_retorna_registro(self, categoria_repo, categoria_bebida):
        output = RemoverCategoriaService(categoria_repo).execute(categoria_bebida.id)

        assert output.id == categoria_bebida.id
        assert categoria_repo.get_by_id(categoria_bebida.id) is None

    def test_remover_desassocia_produtos(self, categoria_repo, produto_repo, produto_coca):
        RemoverCategoriaService(categoria_repo).execute(produto_coca.categoria_id)

        restante = produto_repo.get_by_id(produto_coca.id)
        assert restante is not None
        assert restante.categoria_id is None
        assert restante.categoria is None

    def test_remover_inexistente_propaga_erro_do_repositorio(self, categoria_repo):
        with pytest.raises(RepositoryError):
            RemoverCategoriaService(categoria_repo).execute("nao-existe")

    def test_nao_verifica_existencia_antes(self):
        repo = Mock()
        repo.delete.return_value = CategoriaEntity(
            id="cat-1", nome="Bebidas", tipo=CategoriaTipo.BEBIDA
        )

        RemoverCategoriaService(repo).execute("cat-1")

        repo.get_by_id.assert_not_called()
        repo.delete.assert_called_once_with("cat-1")
