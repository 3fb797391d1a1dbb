"""
Use Cases (Application Services) do Domínio de Categorias.

Este módulo contém os casos de uso que validam a entrada e delegam
a persistência ao repositório de categorias.

Use Cases implementados:
- CriarCategoriaService: Cria nova categoria
- ObterCategoriaService: Obtém categoria específica
- AtualizarCategoriaService: Atualiza nome e tipo
- ListarCategoriasService: Lista todas as categorias
- RemoverCategoriaService: Remove categoria

Princípios:
- Um Use Case = Uma operação de negócio
- Dependências injetadas (DI)
- Erros de validação lançados imediatamente; erros de persistência
  propagam sem tradução
"""

import logging
from typing import List

from src.core.shared.exceptions import ValidationErrorType, ValidationException

from .dtos import AtualizarCategoriaInputDTO, CategoriaOutputDTO, CriarCategoriaInputDTO
from .entities import CategoriaEntity, CategoriaTipo, validar_tipo_categoria
from .ports import CategoriaRepository

logger = logging.getLogger(__name__)


def _validar_tipo(tipo) -> CategoriaTipo:
    """Converte token em CategoriaTipo ou lança CATEGORIA_INVALID_TYPE."""
    if not validar_tipo_categoria(tipo):
        logger.warning(f"Tipo de categoria inválido: {tipo!r}")
        raise ValidationException(ValidationErrorType.CATEGORIA_INVALID_TYPE)

    if isinstance(tipo, CategoriaTipo):
        return tipo
    return CategoriaTipo(tipo)


class CriarCategoriaService:
    """
    Use Case: Criar uma nova categoria.

    Fluxo:
    1. Validar tipo
    2. Criar entidade (sem id)
    3. Persistir via repositório
    4. Retornar DTO de saída

    Example:
        service = CriarCategoriaService(categoria_repo)
        output = service.execute(CriarCategoriaInputDTO(nome="Bebidas", tipo="BEBIDA"))
        print(output.id)
    """

    def __init__(self, categoria_repo: CategoriaRepository):
        self.categoria_repo = categoria_repo

    def execute(self, input_dto: CriarCategoriaInputDTO) -> CategoriaOutputDTO:
        """
        Executa criação de categoria.

        Raises:
            ValidationException: CATEGORIA_INVALID_TYPE se tipo inválido
        """
        tipo = _validar_tipo(input_dto.tipo)

        categoria = CategoriaEntity.criar(nome=input_dto.nome, tipo=tipo)
        salva = self.categoria_repo.save(categoria)

        return CategoriaOutputDTO.from_entity(salva)


class ObterCategoriaService:
    """
    Use Case: Obter categoria por ID.

    Também é usado pelos use cases de produto para checar
    a existência da categoria referenciada.
    """

    def __init__(self, categoria_repo: CategoriaRepository):
        self.categoria_repo = categoria_repo

    def execute(self, categoria_id: str) -> CategoriaOutputDTO:
        """
        Obtém categoria por ID.

        Raises:
            ValidationException: CATEGORIA_NOT_FOUND se não existe
        """
        return CategoriaOutputDTO.from_entity(self.get_entity(categoria_id))

    def get_entity(self, categoria_id: str) -> CategoriaEntity:
        """Retorna a entidade (uso interno entre use cases)."""
        categoria = self.categoria_repo.get_by_id(categoria_id)

        if not categoria:
            raise ValidationException(
                ValidationErrorType.CATEGORIA_NOT_FOUND,
                f"Categoria {categoria_id} não encontrada",
            )

        return categoria


class AtualizarCategoriaService:
    """
    Use Case: Atualizar categoria existente.

    Ordem das verificações:
    1. Existência (CATEGORIA_NOT_FOUND)
    2. Validade do tipo (CATEGORIA_INVALID_TYPE)

    A primeira falha interrompe o fluxo. Campos ausentes na entrada
    mantêm o valor persistido; o tipo é sempre validado.
    """

    def __init__(self, categoria_repo: CategoriaRepository, obter_categoria: ObterCategoriaService):
        self.categoria_repo = categoria_repo
        self.obter_categoria = obter_categoria

    def execute(self, categoria_id: str, input_dto: AtualizarCategoriaInputDTO) -> CategoriaOutputDTO:
        """
        Executa atualização.

        Raises:
            ValidationException: CATEGORIA_NOT_FOUND ou CATEGORIA_INVALID_TYPE
        """
        existente = self.obter_categoria.get_entity(categoria_id)

        tipo = _validar_tipo(input_dto.tipo)

        campos = {"tipo": tipo}
        if input_dto.nome is not None:
            campos["nome"] = input_dto.nome

        atualizada = self.categoria_repo.update(
            categoria_id,
            existente.com_alteracoes(**campos),
        )

        return CategoriaOutputDTO.from_entity(atualizada)


class ListarCategoriasService:
    """
    Use Case: Listar todas as categorias.
    """

    def __init__(self, categoria_repo: CategoriaRepository):
        self.categoria_repo = categoria_repo

    def execute(self) -> List[CategoriaOutputDTO]:
        return [CategoriaOutputDTO.from_entity(c) for c in self.categoria_repo.list_all()]


class RemoverCategoriaService:
    """
    Use Case: Remover categoria.

    Delega diretamente ao repositório, sem verificar existência antes.
    Se o registro não existir, o erro do repositório propaga.
    """

    def __init__(self, categoria_repo: CategoriaRepository):
        self.categoria_repo = categoria_repo

    def execute(self, categoria_id: str) -> CategoriaOutputDTO:
        removida = self.categoria_repo.delete(categoria_id)
        return CategoriaOutputDTO.from_entity(removida)
