"""
Entidades do Domínio de Produtos.

Entidades:
- ProdutoEntity: Item vendável do cardápio

Regras de Negócio Encapsuladas:
- Timestamp de atualização renovado quando qualquer campo escalar muda
- A associação carregada (categoria) pode mudar sem renovar o timestamp
"""

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from src.core.categorias.entities import CategoriaEntity


@dataclass(frozen=True)
class ProdutoEntity:
    """
    Entidade de Domínio: Produto.

    Registro imutável; alterações via com_alteracoes().

    Invariantes:
    - categoria_id, quando presente, referencia categoria existente
      no momento da criação/atualização (garantido pelos use cases)

    Attributes:
        id: Identificador atribuído pelo armazenamento
        nome: Nome do produto
        categoria_id: Referência opcional à categoria
        tempo_preparo: Tempo de preparo em segundos
        preco: Preço de venda
        descricao: Descrição livre
        imagem: URL opcional da imagem
        criado_em: Data/hora de criação
        atualizado_em: Data/hora da última alteração
        categoria: Categoria carregada junto (opcional)
    """

    nome: str
    categoria_id: Optional[str] = None
    tempo_preparo: Optional[int] = None
    preco: Optional[Decimal] = None
    descricao: Optional[str] = None
    imagem: Optional[str] = None
    id: Optional[str] = None
    criado_em: Optional[datetime] = None
    atualizado_em: Optional[datetime] = None
    categoria: Optional[CategoriaEntity] = None

    CAMPOS_MUTAVEIS = (
        "nome",
        "categoria_id",
        "tempo_preparo",
        "preco",
        "descricao",
        "imagem",
    )

    @classmethod
    def criar(
        cls,
        nome: str,
        categoria_id: Optional[str] = None,
        tempo_preparo: Optional[int] = None,
        preco: Optional[Decimal] = None,
        descricao: Optional[str] = None,
        imagem: Optional[str] = None,
    ) -> "ProdutoEntity":
        """
        Factory method para novo produto (ainda não persistido).

        Example:
            produto = ProdutoEntity.criar(
                nome="Coca-Cola",
                categoria_id=bebidas.id,
                tempo_preparo=5,
                preco=Decimal("5.50"),
            )
        """
        return cls(
            nome=nome,
            categoria_id=categoria_id or None,
            tempo_preparo=tempo_preparo,
            preco=preco,
            descricao=descricao,
            imagem=imagem,
            atualizado_em=datetime.now(),
        )

    def com_alteracoes(self, **campos: Any) -> "ProdutoEntity":
        """
        Retorna cópia com os campos informados substituídos.

        Args:
            **campos: Campos escalares e/ou categoria

        Returns:
            Nova entidade; atualizado_em renovado se algum campo
            escalar mudou

        Raises:
            TypeError: Se campo não for alterável
        """
        permitidos = set(self.CAMPOS_MUTAVEIS) | {"categoria"}
        invalidos = set(campos) - permitidos
        if invalidos:
            raise TypeError(f"Campos não alteráveis: {sorted(invalidos)}")

        escalar_mudou = any(
            getattr(self, nome) != valor
            for nome, valor in campos.items()
            if nome in self.CAMPOS_MUTAVEIS
        )

        if escalar_mudou:
            campos["atualizado_em"] = datetime.now()

        return replace(self, **campos)

    def com_categoria(self, categoria: Optional[CategoriaEntity]) -> "ProdutoEntity":
        """Associa categoria carregada sem alterar atualizado_em."""
        return replace(self, categoria=categoria)

    def __repr__(self) -> str:
        return (
            f"ProdutoEntity("
            f"id={self.id}, "
            f"nome='{self.nome}', "
            f"categoria_id={self.categoria_id}"
            f")"
        )
