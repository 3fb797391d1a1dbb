"""
Conversão de campos de entrada (payload JSON) para os DTOs.
"""

from typing import Any, Optional

from .exceptions import ValidationErrorType, ValidationException


def to_str(value: Any, field_name: str, max_length: Optional[int] = None) -> Optional[str]:
    """
    Aceita apenas texto (ou None), opcionalmente limitado em tamanho.

    Raises:
        ValidationException: INVALID_REQUEST para números, listas, objetos
            ou texto maior que max_length
    """
    if value is None:
        return None

    if not isinstance(value, str):
        raise ValidationException(
            ValidationErrorType.INVALID_REQUEST,
            f"{field_name} deve ser texto",
        )

    if max_length is not None and len(value) > max_length:
        raise ValidationException(
            ValidationErrorType.INVALID_REQUEST,
            f"{field_name} excede {max_length} caracteres",
        )

    return value
