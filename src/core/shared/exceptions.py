"""
Exceções de Domínio do Catálogo de Cardápio.

Este módulo define a taxonomia de erros compartilhada entre as camadas.
Os erros de validação são identificados pelo TIPO (ValidationErrorType),
não pela classe, permitindo que a camada de apresentação mapeie cada
tipo para um status HTTP.

Hierarquia:
    DomainException (base)
    ├── ValidationException (erro tipado por ValidationErrorType)
    └── RepositoryError (falha de persistência, repassada sem tradução)
"""

from enum import Enum
from typing import Optional


class ValidationErrorType(Enum):
    """
    Tipos de erro de validação do catálogo.

    Valores iguais aos nomes para facilitar serialização.
    """

    CATEGORIA_NOT_FOUND = "CATEGORIA_NOT_FOUND"
    CATEGORIA_INVALID_TYPE = "CATEGORIA_INVALID_TYPE"
    PRODUTO_NOT_FOUND = "PRODUTO_NOT_FOUND"
    INVALID_REQUEST = "INVALID_REQUEST"


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Todas as exceções específicas do domínio devem herdar desta classe.
    Isso permite capturar qualquer erro de domínio de forma genérica.

    Example:
        try:
            service.execute(input_dto)
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationException(DomainException):
    """
    Erro de validação identificado por tipo.

    Lançada pelos use cases quando uma entrada viola um invariante
    (tipo de categoria inválido) ou referencia algo inexistente
    (categoria/produto não encontrado).

    Example:
        if not validar_tipo_categoria(tipo):
            raise ValidationException(ValidationErrorType.CATEGORIA_INVALID_TYPE)
    """

    def __init__(self, error_type: ValidationErrorType, message: Optional[str] = None):
        self.type = error_type
        super().__init__(
            message or f"Validation error: {error_type.value}",
            error_type.value,
        )

    @property
    def is_not_found(self) -> bool:
        """Verifica se o erro indica entidade inexistente."""
        return self.type in (
            ValidationErrorType.CATEGORIA_NOT_FOUND,
            ValidationErrorType.PRODUTO_NOT_FOUND,
        )


class RepositoryError(DomainException):
    """
    Falha na camada de persistência.

    Lançada pelos adapters de repositório (ex: update/delete de registro
    inexistente). Use cases não traduzem nem capturam este erro.
    """

    def __init__(self, message: str, entity_type: str = None, entity_id: str = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "REPOSITORY_ERROR")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id:
            result["entity_id"] = self.entity_id
        return result
