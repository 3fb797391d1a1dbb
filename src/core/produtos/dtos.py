"""
Data Transfer Objects (DTOs) do Domínio de Produtos.

Tipos de DTOs:
- Input DTOs: Recebem dados de entrada (de APIs)
- Output DTOs: Formatam dados para resposta
"""

from dataclasses import dataclass, fields
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from src.core.shared.exceptions import ValidationErrorType, ValidationException
from src.core.shared.fields import to_str
from src.core.categorias.dtos import CategoriaOutputDTO

from .entities import ProdutoEntity


# Limites das colunas: DecimalField(max_digits=10, decimal_places=2)
# e PositiveIntegerField
_CENTAVO = Decimal("0.01")
_PRECO_LIMITE = Decimal("1e8")
_TEMPO_MAXIMO = 2147483647


def _invalido(field_name: str, motivo: str) -> ValidationException:
    return ValidationException(
        ValidationErrorType.INVALID_REQUEST,
        f"{field_name} {motivo}",
    )


def _to_decimal(value: Any, field_name: str) -> Optional[Decimal]:
    """
    Converte número JSON em Decimal.

    Rejeita booleanos, valores não finitos (NaN/Infinity) e valores
    que não cabem em 8 dígitos inteiros após arredondar para centavos.
    """
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise _invalido(field_name, "deve ser numérico")
    try:
        numero = Decimal(str(value))
    except InvalidOperation:
        raise _invalido(field_name, "deve ser numérico")

    if not numero.is_finite():
        raise _invalido(field_name, "deve ser finito")
    if abs(numero) >= _PRECO_LIMITE or abs(numero.quantize(_CENTAVO)) >= _PRECO_LIMITE:
        raise _invalido(field_name, "fora do intervalo permitido")

    return numero


def _to_int(value: Any, field_name: str) -> Optional[int]:
    """
    Converte número JSON em int (segundos).

    Aceita float apenas se for inteiro (5.0); 5.9 é rejeitado.
    """
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _invalido(field_name, "deve ser numérico")
    if isinstance(value, float) and not value.is_integer():
        # is_integer() é False para NaN e Infinity
        raise _invalido(field_name, "deve ser um número inteiro")

    numero = int(value)
    if numero < 0 or numero > _TEMPO_MAXIMO:
        raise _invalido(field_name, "fora do intervalo permitido")

    return numero


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class ProdutoInputDTO:
    """
    DTO de entrada para criar ou atualizar produto.

    Todos os campos são opcionais (atualização parcial). Campos None
    mantêm o valor persistido numa atualização.

    Attributes:
        nome: Nome do produto
        categoria_id: ID da categoria (vazio ou None = sem categoria)
        tempo_preparo: Tempo de preparo em segundos
        preco: Preço
        descricao: Descrição livre
        imagem: URL da imagem
    """

    nome: Optional[str] = None
    categoria_id: Optional[str] = None
    tempo_preparo: Optional[int] = None
    preco: Optional[Decimal] = None
    descricao: Optional[str] = None
    imagem: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "ProdutoInputDTO":
        """
        Cria DTO a partir de payload JSON.

        O campo id, se presente, é ignorado.

        Raises:
            ValidationException: INVALID_REQUEST se campos de texto não forem
                texto ou preço/tempo forem inválidos
        """
        return cls(
            nome=to_str(data.get("nome"), "nome", max_length=200),
            categoria_id=to_str(data.get("categoria_id"), "categoria_id"),
            tempo_preparo=_to_int(data.get("tempo_preparo"), "tempo_preparo"),
            preco=_to_decimal(data.get("preco"), "preco"),
            descricao=to_str(data.get("descricao"), "descricao"),
            imagem=to_str(data.get("imagem"), "imagem", max_length=500),
        )

    def campos_informados(self) -> Dict[str, Any]:
        """Retorna apenas os campos diferentes de None."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class ProdutoOutputDTO:
    """
    DTO de saída com dados completos do produto.
    """

    id: str
    nome: str
    categoria_id: Optional[str]
    tempo_preparo: Optional[int]
    preco: Optional[Decimal]
    descricao: Optional[str]
    imagem: Optional[str]
    criado_em: Optional[datetime]
    atualizado_em: Optional[datetime]
    categoria: Optional[CategoriaOutputDTO] = None

    @classmethod
    def from_entity(cls, entity: ProdutoEntity) -> "ProdutoOutputDTO":
        """
        Cria DTO a partir de entidade.

        Args:
            entity: Entidade de domínio

        Returns:
            DTO de saída
        """
        return cls(
            id=entity.id,
            nome=entity.nome,
            categoria_id=entity.categoria_id,
            tempo_preparo=entity.tempo_preparo,
            preco=entity.preco,
            descricao=entity.descricao,
            imagem=entity.imagem,
            criado_em=entity.criado_em,
            atualizado_em=entity.atualizado_em,
            categoria=(
                CategoriaOutputDTO.from_entity(entity.categoria)
                if entity.categoria else None
            ),
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (para JSON)."""
        result = {
            "id": self.id,
            "nome": self.nome,
            "categoria_id": self.categoria_id,
            "tempo_preparo": self.tempo_preparo,
            "preco": float(self.preco) if self.preco is not None else None,
            "descricao": self.descricao,
            "imagem": self.imagem,
            "criado_em": self.criado_em.isoformat() if self.criado_em else None,
            "atualizado_em": self.atualizado_em.isoformat() if self.atualizado_em else None,
        }
        if self.categoria:
            result["categoria"] = self.categoria.to_dict()
        return result
