"""
Testes Unitários para Entidades do Domínio de Categorias.

Coverage:
- validar_tipo_categoria (aceitação exata dos quatro tipos)
- CategoriaEntity (criação, alterações imutáveis, timestamps)
- Input DTOs (tipos e tamanho do nome)
"""

import pytest
from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta

from src.core.categorias.dtos import AtualizarCategoriaInputDTO, CriarCategoriaInputDTO
from src.core.categorias.entities import (
    CategoriaEntity,
    CategoriaTipo,
    validar_tipo_categoria,
)
from src.core.shared.exceptions import ValidationErrorType, ValidationException


class TestValidarTipoCategoria:
    """Testes para o validador de tipo."""

    @pytest.mark.parametrize("tipo", ["BEBIDA", "SOBREMESA", "ACOMPANHAMENTO", "LANCHE"])
    def test_aceita_tipos_validos(self, tipo):
        assert validar_tipo_categoria(tipo) is True

    def test_aceita_membro_do_enum(self):
        assert validar_tipo_categoria(CategoriaTipo.LANCHE) is True

    @pytest.mark.parametrize("valor", [
        "bebida",
        "Bebida",
        " BEBIDA",
        "BEBIDA ",
        "",
        "PIZZA",
        0,
        1,
        True,
        None,
        {},
        [],
        ["BEBIDA"],
        {"tipo": "BEBIDA"},
    ])
    def test_rejeita_valores_invalidos(self, valor):
        assert validar_tipo_categoria(valor) is False

    def test_is_valid_no_enum_delega_para_validador(self):
        assert CategoriaTipo.is_valid("SOBREMESA")
        assert not CategoriaTipo.is_valid("sobremesa")

    def test_valor_igual_ao_nome(self):
        for tipo in CategoriaTipo:
            assert tipo.value == tipo.name


class TestCategoriaEntityCriacao:

    def test_criar_sem_id(self):
        categoria = CategoriaEntity.criar("Bebidas", CategoriaTipo.BEBIDA)

        assert categoria.id is None
        assert categoria.persistida is False
        assert categoria.nome == "Bebidas"
        assert categoria.tipo == CategoriaTipo.BEBIDA
        assert categoria.atualizado_em is not None

    def test_entidade_imutavel(self):
        categoria = CategoriaEntity.criar("Bebidas", CategoriaTipo.BEBIDA)

        with pytest.raises(FrozenInstanceError):
            categoria.nome = "Outra"

    def test_repr(self):
        categoria = CategoriaEntity(nome="Lanches", tipo=CategoriaTipo.LANCHE, id="abc")
        assert "Lanches" in repr(categoria)
        assert "LANCHE" in repr(categoria)


class TestCategoriaEntityAlteracoes:

    @pytest.fixture
    def categoria(self):
        antigo = datetime.now() - timedelta(days=1)
        return CategoriaEntity(
            id="cat-1",
            nome="Bebidas",
            tipo=CategoriaTipo.BEBIDA,
            criado_em=antigo,
            atualizado_em=antigo,
        )

    def test_alterar_nome_renova_timestamp(self, categoria):
        alterada = categoria.com_alteracoes(nome="Bebidas geladas")

        assert alterada.nome == "Bebidas geladas"
        assert alterada.atualizado_em > categoria.atualizado_em
        assert alterada.criado_em == categoria.criado_em
        # Original intacta
        assert categoria.nome == "Bebidas"

    def test_alterar_tipo_renova_timestamp(self, categoria):
        alterada = categoria.com_alteracoes(tipo=CategoriaTipo.SOBREMESA)

        assert alterada.tipo == CategoriaTipo.SOBREMESA
        assert alterada.atualizado_em > categoria.atualizado_em

    def test_sem_mudanca_retorna_mesma_instancia(self, categoria):
        assert categoria.com_alteracoes(nome="Bebidas", tipo=CategoriaTipo.BEBIDA) is categoria

    def test_campo_nao_alteravel(self, categoria):
        with pytest.raises(TypeError):
            categoria.com_alteracoes(id="outro")


class TestCategoriaInputDTO:

    @pytest.mark.parametrize("dto_class", [CriarCategoriaInputDTO, AtualizarCategoriaInputDTO])
    @pytest.mark.parametrize("nome", [["x", "y"], {"a": 1}, 10, True, "x" * 121])
    def test_nome_invalido(self, dto_class, nome):
        with pytest.raises(ValidationException) as exc_info:
            dto_class.from_dict({"nome": nome, "tipo": "BEBIDA"})

        assert exc_info.value.type == ValidationErrorType.INVALID_REQUEST

    def test_tipo_mantido_como_recebido(self):
        dto = CriarCategoriaInputDTO.from_dict({"id": "x", "nome": "Bebidas", "tipo": 1})

        assert dto.nome == "Bebidas"
        assert dto.tipo == 1
