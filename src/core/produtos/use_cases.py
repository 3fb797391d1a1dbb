"""
Use Cases (Application Services) do Domínio de Produtos.

Use Cases implementados:
- CriarProdutoService: Cria novo produto
- ObterProdutoService: Obtém produto específico
- AtualizarProdutoService: Atualiza produto existente
- ListarProdutosService: Lista todos os produtos
- ListarProdutosPorCategoriaService: Lista produtos de uma categoria
- BuscarProdutosPorNomeService: Busca por trecho do nome
- RemoverProdutoService: Remove produto

A existência da categoria referenciada é verificada através do
ObterCategoriaService, injetado nos use cases de escrita.
"""

import logging
from typing import List, Optional

from src.core.shared.exceptions import ValidationErrorType, ValidationException
from src.core.categorias.use_cases import ObterCategoriaService

from .dtos import ProdutoInputDTO, ProdutoOutputDTO
from .entities import ProdutoEntity
from .ports import ProdutoRepository

logger = logging.getLogger(__name__)


def _validar_categoria(obter_categoria: ObterCategoriaService, categoria_id: Optional[str]) -> None:
    """
    Verifica se a categoria referenciada existe.

    Ausente, None ou vazio: nenhuma verificação é feita.

    Raises:
        ValidationException: CATEGORIA_NOT_FOUND
    """
    if not categoria_id:
        return

    obter_categoria.get_entity(categoria_id)


class CriarProdutoService:
    """
    Use Case: Criar um novo produto.

    Fluxo:
    1. Verificar categoria (se informada)
    2. Criar entidade (sem id)
    3. Persistir via repositório
    4. Retornar DTO de saída

    Example:
        service = CriarProdutoService(produto_repo, obter_categoria)
        output = service.execute(ProdutoInputDTO(nome="Coca-Cola", categoria_id=cat_id))
    """

    def __init__(self, produto_repo: ProdutoRepository, obter_categoria: ObterCategoriaService):
        self.produto_repo = produto_repo
        self.obter_categoria = obter_categoria

    def execute(self, input_dto: ProdutoInputDTO) -> ProdutoOutputDTO:
        """
        Executa criação de produto.

        Raises:
            ValidationException: CATEGORIA_NOT_FOUND se categoria informada não existe
        """
        _validar_categoria(self.obter_categoria, input_dto.categoria_id)

        produto = ProdutoEntity.criar(
            nome=input_dto.nome,
            categoria_id=input_dto.categoria_id,
            tempo_preparo=input_dto.tempo_preparo,
            preco=input_dto.preco,
            descricao=input_dto.descricao,
            imagem=input_dto.imagem,
        )
        salvo = self.produto_repo.save(produto)

        return ProdutoOutputDTO.from_entity(salvo)


class ObterProdutoService:
    """
    Use Case: Obter produto por ID.
    """

    def __init__(self, produto_repo: ProdutoRepository):
        self.produto_repo = produto_repo

    def execute(self, produto_id: str) -> ProdutoOutputDTO:
        """
        Raises:
            ValidationException: PRODUTO_NOT_FOUND se não existe
        """
        return ProdutoOutputDTO.from_entity(self.get_entity(produto_id))

    def get_entity(self, produto_id: str) -> ProdutoEntity:
        produto = self.produto_repo.get_by_id(produto_id)

        if not produto:
            raise ValidationException(
                ValidationErrorType.PRODUTO_NOT_FOUND,
                f"Produto {produto_id} não encontrado",
            )

        return produto


class AtualizarProdutoService:
    """
    Use Case: Atualizar produto existente.

    Ordem das verificações:
    1. Existência do produto (PRODUTO_NOT_FOUND)
    2. Existência da categoria, se informada (CATEGORIA_NOT_FOUND)

    Campos ausentes, e categoria_id vazio, mantêm o valor persistido.
    """

    def __init__(
        self,
        produto_repo: ProdutoRepository,
        obter_produto: ObterProdutoService,
        obter_categoria: ObterCategoriaService,
    ):
        self.produto_repo = produto_repo
        self.obter_produto = obter_produto
        self.obter_categoria = obter_categoria

    def execute(self, produto_id: str, input_dto: ProdutoInputDTO) -> ProdutoOutputDTO:
        existente = self.obter_produto.get_entity(produto_id)

        _validar_categoria(self.obter_categoria, input_dto.categoria_id)

        campos = input_dto.campos_informados()
        if not campos.get("categoria_id"):
            campos.pop("categoria_id", None)

        logger.debug(f"Atualizando produto {produto_id}: {sorted(campos)}")

        atualizado = self.produto_repo.update(
            produto_id,
            existente.com_alteracoes(**campos),
        )

        return ProdutoOutputDTO.from_entity(atualizado)


class ListarProdutosService:
    """
    Use Case: Listar todos os produtos.
    """

    def __init__(self, produto_repo: ProdutoRepository):
        self.produto_repo = produto_repo

    def execute(self) -> List[ProdutoOutputDTO]:
        return [ProdutoOutputDTO.from_entity(p) for p in self.produto_repo.list_all()]


class ListarProdutosPorCategoriaService:
    """
    Use Case: Listar produtos de uma categoria.

    Resultado vazio é tratado como PRODUTO_NOT_FOUND, ao contrário
    da busca por nome.
    """

    def __init__(self, produto_repo: ProdutoRepository):
        self.produto_repo = produto_repo

    def execute(self, categoria_id: str) -> List[ProdutoOutputDTO]:
        """
        Raises:
            ValidationException: PRODUTO_NOT_FOUND se nenhum produto
        """
        produtos = self.produto_repo.list_by_categoria(categoria_id)

        if not produtos:
            raise ValidationException(
                ValidationErrorType.PRODUTO_NOT_FOUND,
                f"Nenhum produto na categoria {categoria_id}",
            )

        return [ProdutoOutputDTO.from_entity(p) for p in produtos]


class BuscarProdutosPorNomeService:
    """
    Use Case: Buscar produtos por trecho do nome.

    Sem diferenciar maiúsculas/minúsculas. Lista vazia é resposta válida.
    """

    def __init__(self, produto_repo: ProdutoRepository):
        self.produto_repo = produto_repo

    def execute(self, nome: str) -> List[ProdutoOutputDTO]:
        return [ProdutoOutputDTO.from_entity(p) for p in self.produto_repo.search_by_nome(nome)]


class RemoverProdutoService:
    """
    Use Case: Remover produto.

    Delega diretamente ao repositório, sem verificar existência antes.
    """

    def __init__(self, produto_repo: ProdutoRepository):
        self.produto_repo = produto_repo

    def execute(self, produto_id: str) -> ProdutoOutputDTO:
        removido = self.produto_repo.delete(produto_id)
        return ProdutoOutputDTO.from_entity(removido)
