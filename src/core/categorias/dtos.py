"""
Data Transfer Objects (DTOs) do Domínio de Categorias.

DTOs são estruturas simples para transportar dados entre camadas,
evitando vazamento das entidades para a camada de apresentação.

Tipos de DTOs:
- Input DTOs: Recebem dados de entrada (de APIs)
- Output DTOs: Formatam dados para resposta
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from src.core.shared.fields import to_str

from .entities import CategoriaEntity


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CriarCategoriaInputDTO:
    """
    DTO de entrada para criar categoria.

    O tipo é mantido como recebido (sem conversão) para que o
    use case decida se é válido.

    Attributes:
        nome: Nome da categoria
        tipo: Token do tipo (ex: "BEBIDA")
    """

    nome: Optional[str] = None
    tipo: Any = None

    @classmethod
    def from_dict(cls, data: dict) -> "CriarCategoriaInputDTO":
        """
        Cria DTO a partir de payload JSON (id é ignorado).

        Raises:
            ValidationException: INVALID_REQUEST se nome não for texto
        """
        return cls(nome=to_str(data.get("nome"), "nome", max_length=120), tipo=data.get("tipo"))

    def to_dict(self) -> dict:
        """Converte para dicionário."""
        return {
            "nome": self.nome,
            "tipo": self.tipo,
        }


@dataclass(frozen=True)
class AtualizarCategoriaInputDTO:
    """
    DTO de entrada para atualizar categoria.

    Campos None mantêm o valor persistido. O tipo é sempre validado.

    Attributes:
        nome: Novo nome (opcional)
        tipo: Novo token do tipo
    """

    nome: Optional[str] = None
    tipo: Any = None

    @classmethod
    def from_dict(cls, data: dict) -> "AtualizarCategoriaInputDTO":
        """
        Cria DTO a partir de payload JSON (id é ignorado).

        Raises:
            ValidationException: INVALID_REQUEST se nome não for texto
        """
        return cls(nome=to_str(data.get("nome"), "nome", max_length=120), tipo=data.get("tipo"))

    def to_dict(self) -> dict:
        return {
            "nome": self.nome,
            "tipo": self.tipo,
        }


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class CategoriaOutputDTO:
    """
    DTO de saída com dados completos da categoria.

    Attributes:
        id: Identificador da categoria
        nome: Nome de exibição
        tipo: Token do tipo
        criado_em: Data/hora de criação
        atualizado_em: Data/hora da última atualização
    """

    id: str
    nome: str
    tipo: str
    criado_em: Optional[datetime]
    atualizado_em: Optional[datetime]

    @classmethod
    def from_entity(cls, entity: CategoriaEntity) -> "CategoriaOutputDTO":
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
            tipo=entity.tipo.value,
            criado_em=entity.criado_em,
            atualizado_em=entity.atualizado_em,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (para JSON)."""
        return {
            "id": self.id,
            "nome": self.nome,
            "tipo": self.tipo,
            "criado_em": self.criado_em.isoformat() if self.criado_em else None,
            "atualizado_em": self.atualizado_em.isoformat() if self.atualizado_em else None,
        }
