"""
Base das API Views JSON do catálogo.

Formato:
- Entrada: JSON
- Saída: JSON com estrutura {success, data/error, meta}

Mapeamento de erros para status HTTP:
- CATEGORIA_NOT_FOUND, PRODUTO_NOT_FOUND → 404
- CATEGORIA_INVALID_TYPE, INVALID_REQUEST → 400
- RepositoryError → 500 (mensagem do armazenamento)
- Qualquer outro erro → 500 genérico
"""

import json
import logging
from typing import Any, Dict

from django.views import View
from django.http import JsonResponse, HttpRequest
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import csrf_exempt

from src.core.shared.exceptions import (
    DomainException,
    RepositoryError,
    ValidationErrorType,
    ValidationException,
)
from src.config.container import get_container

logger = logging.getLogger(__name__)


VALIDATION_STATUS = {
    ValidationErrorType.CATEGORIA_NOT_FOUND: 404,
    ValidationErrorType.PRODUTO_NOT_FOUND: 404,
    ValidationErrorType.CATEGORIA_INVALID_TYPE: 400,
    ValidationErrorType.INVALID_REQUEST: 400,
}


# =============================================================================
# Helpers
# =============================================================================

def json_response(success: bool, data: Any = None, error: str = None,
                  status: int = 200, meta: Dict = None) -> JsonResponse:
    """
    Cria resposta JSON padronizada.

    Args:
        success: Se operação foi bem sucedida
        data: Dados da resposta
        error: Mensagem de erro (se aplicável)
        status: HTTP status code
        meta: Metadados adicionais

    Returns:
        JsonResponse formatada
    """
    response = {'success': success}

    if data is not None:
        response['data'] = data

    if error is not None:
        response['error'] = error

    if meta is not None:
        response['meta'] = meta

    return JsonResponse(response, status=status)


def parse_json_body(request: HttpRequest) -> Dict:
    """
    Parseia body JSON do request.

    Raises:
        ValidationException: INVALID_REQUEST se JSON inválido ou não for objeto
    """
    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValidationException(
            ValidationErrorType.INVALID_REQUEST,
            f"JSON inválido: {e}",
        )

    if not isinstance(data, dict):
        raise ValidationException(
            ValidationErrorType.INVALID_REQUEST,
            "Corpo da requisição deve ser um objeto JSON",
        )

    return data


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Fornece:
    - Parsing de JSON
    - Acesso ao container DI
    - Tratamento de erros padronizado
    """

    def get_container(self):
        """Retorna container de DI."""
        return get_container()

    def get_service(self, service_name: str):
        """Obtém service do container."""
        return getattr(self.get_container(), service_name)()

    def parse_body(self, request: HttpRequest) -> Dict:
        """Parseia body JSON."""
        return parse_json_body(request)

    def handle_exception(self, e: Exception) -> JsonResponse:
        """
        Trata exceções e retorna resposta apropriada.
        """
        if isinstance(e, ValidationException):
            return json_response(
                success=False,
                error=str(e),
                status=VALIDATION_STATUS.get(e.type, 400),
                meta={'type': e.type.value},
            )

        if isinstance(e, RepositoryError):
            logger.error(f"Falha de persistência: {e}")
            return json_response(
                success=False,
                error=str(e),
                status=500,
                meta={'entity_type': e.entity_type, 'entity_id': e.entity_id},
            )

        if isinstance(e, DomainException):
            return json_response(
                success=False,
                error=str(e),
                status=400
            )

        # Erro inesperado
        logger.exception(f"Erro inesperado na API: {e}")
        return json_response(
            success=False,
            error="Erro interno do servidor",
            status=500
        )
