"""
Entidades do Domínio de Categorias.

Entidades:
- CategoriaTipo: Tipos fixos de categoria do cardápio
- CategoriaEntity: Registro imutável de categoria

Regras de Negócio Encapsuladas:
- Tipo de categoria restrito a um conjunto fechado
- Timestamp de atualização renovado sempre que nome ou tipo mudam
"""

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Any, Optional


class CategoriaTipo(Enum):
    """
    Tipos de categoria do cardápio.

    O valor de cada membro é igual ao nome, que é também o
    token aceito na entrada e gravado no banco.
    """

    BEBIDA = "BEBIDA"
    SOBREMESA = "SOBREMESA"
    ACOMPANHAMENTO = "ACOMPANHAMENTO"
    LANCHE = "LANCHE"

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        """Verifica se valor é um tipo de categoria válido."""
        return validar_tipo_categoria(value)


_TIPOS_VALIDOS = frozenset(tipo.value for tipo in CategoriaTipo)


def validar_tipo_categoria(value: Any) -> bool:
    """
    Verifica se valor pertence ao conjunto de tipos de categoria.

    Comparação exata e sensível a maiúsculas: não há conversão de
    números, booleanos ou strings com espaços. Membros do enum
    CategoriaTipo também são aceitos.

    Args:
        value: Valor arbitrário vindo da entrada

    Returns:
        True se for um dos tipos, False caso contrário (nunca lança)

    Example:
        validar_tipo_categoria("BEBIDA")    # True
        validar_tipo_categoria("bebida")    # False
        validar_tipo_categoria(" BEBIDA ")  # False
    """
    if isinstance(value, CategoriaTipo):
        return True
    return type(value) is str and value in _TIPOS_VALIDOS


@dataclass(frozen=True)
class CategoriaEntity:
    """
    Entidade de Domínio: Categoria.

    Registro imutável. Alterações produzem uma nova instância
    via com_alteracoes(), que também renova atualizado_em.

    Invariantes:
    - tipo é sempre um membro de CategoriaTipo

    Attributes:
        id: Identificador atribuído pelo armazenamento (None antes de salvar)
        nome: Nome de exibição
        tipo: Tipo da categoria
        criado_em: Data/hora de criação
        atualizado_em: Data/hora da última alteração de nome ou tipo

    Example:
        categoria = CategoriaEntity.criar(nome="Bebidas", tipo=CategoriaTipo.BEBIDA)
        renomeada = categoria.com_alteracoes(nome="Bebidas geladas")
    """

    nome: str
    tipo: CategoriaTipo
    id: Optional[str] = None
    criado_em: Optional[datetime] = None
    atualizado_em: Optional[datetime] = None

    CAMPOS_MUTAVEIS = ("nome", "tipo")

    @classmethod
    def criar(cls, nome: str, tipo: CategoriaTipo) -> "CategoriaEntity":
        """
        Factory method para nova categoria (ainda não persistida).

        Args:
            nome: Nome de exibição
            tipo: Tipo da categoria

        Returns:
            Nova instância sem id
        """
        return cls(nome=nome, tipo=tipo, atualizado_em=datetime.now())

    def com_alteracoes(self, **campos: Any) -> "CategoriaEntity":
        """
        Retorna cópia com os campos informados substituídos.

        Args:
            **campos: nome e/ou tipo

        Returns:
            Nova entidade; atualizado_em renovado se algo mudou

        Raises:
            TypeError: Se campo não for mutável
        """
        invalidos = set(campos) - set(self.CAMPOS_MUTAVEIS)
        if invalidos:
            raise TypeError(f"Campos não alteráveis: {sorted(invalidos)}")

        mudou = any(getattr(self, nome) != valor for nome, valor in campos.items())
        if not mudou:
            return self

        return replace(self, atualizado_em=datetime.now(), **campos)

    @property
    def persistida(self) -> bool:
        """Verifica se entidade já tem id atribuído."""
        return self.id is not None

    def __repr__(self) -> str:
        return (
            f"CategoriaEntity("
            f"id={self.id}, "
            f"nome='{self.nome}', "
            f"tipo={self.tipo.value}"
            f")"
        )
