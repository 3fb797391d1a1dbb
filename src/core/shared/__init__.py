"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio (taxonomia tipada de erros)
- Interfaces (Ports)
"""

from .exceptions import (
    DomainException,
    ValidationErrorType,
    ValidationException,
    RepositoryError,
)
from .interfaces import Repository

__all__ = [
    "DomainException",
    "ValidationErrorType",
    "ValidationException",
    "RepositoryError",
    "Repository",
]
