"""
Health check do banco de dados.

Executa um SELECT 1 na conexão padrão do Django e reporta
engine e estado da conexão.
"""

from typing import Any, Dict
import logging

from django.db import DatabaseError, connection
from django.http import HttpRequest, JsonResponse
from django.views import View

logger = logging.getLogger(__name__)


def check_database_connection() -> Dict[str, Any]:
    """
    Verifica conexão e retorna informações do banco.

    Returns:
        Dict com informações da conexão
    """
    engine = connection.settings_dict.get("ENGINE", "")

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError as e:
        logger.error(f"Health check failed: {e}")
        return {
            "status": "error",
            "engine": engine,
            "error": str(e),
            "healthy": False,
        }

    return {
        "status": "connected",
        "engine": engine,
        "database": str(connection.settings_dict.get("NAME", "")),
        "healthy": True,
    }


class HealthView(View):
    """GET /health/ - 200 se o banco responde, 503 caso contrário."""

    def get(self, request: HttpRequest) -> JsonResponse:
        info = check_database_connection()
        status = 200 if info["healthy"] else 503
        return JsonResponse({"status": "ok" if info["healthy"] else "error", "database": info}, status=status)
