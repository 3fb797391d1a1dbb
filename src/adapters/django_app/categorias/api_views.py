"""
API Views JSON para o domínio de Categorias.

Endpoints:
- GET /categorias/ - Listar categorias
- POST /categorias/ - Criar categoria
- GET /categorias/<id>/ - Obter categoria
- PUT /categorias/<id>/ - Atualizar categoria
- DELETE /categorias/<id>/ - Remover categoria
"""

import logging

from django.http import JsonResponse, HttpRequest

from src.core.categorias.dtos import AtualizarCategoriaInputDTO, CriarCategoriaInputDTO

from ..shared.api import BaseAPIView, json_response

logger = logging.getLogger(__name__)


class CategoriaAPIListView(BaseAPIView):
    """
    API para listar e criar categorias.

    GET /categorias/ - Lista categorias
    POST /categorias/ - Cria categoria
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        """Lista todas as categorias."""
        try:
            categorias = self.get_service('listar_categorias_service').execute()

            return json_response(
                success=True,
                data=[c.to_dict() for c in categorias],
                meta={'total': len(categorias)},
            )

        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Cria nova categoria.

        Body JSON:
        {
            "nome": "string",
            "tipo": "BEBIDA|SOBREMESA|ACOMPANHAMENTO|LANCHE"
        }
        """
        try:
            data = self.parse_body(request)

            output = self.get_service('criar_categoria_service').execute(
                CriarCategoriaInputDTO.from_dict(data)
            )

            logger.info(f"API: Categoria criada: {output.id}")

            return json_response(
                success=True,
                data=output.to_dict(),
                status=201
            )

        except Exception as e:
            return self.handle_exception(e)


class CategoriaAPIDetailView(BaseAPIView):
    """
    API para operações em categoria específica.

    GET /categorias/<id>/ - Obter categoria
    PUT /categorias/<id>/ - Atualizar categoria
    DELETE /categorias/<id>/ - Remover categoria
    """

    def get(self, request: HttpRequest, pk: str) -> JsonResponse:
        """Obtém categoria."""
        try:
            categoria = self.get_service('obter_categoria_service').execute(pk)

            return json_response(success=True, data=categoria.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: str) -> JsonResponse:
        """
        Atualiza categoria.

        Body JSON:
        {
            "nome": "string (opcional)",
            "tipo": "BEBIDA|SOBREMESA|ACOMPANHAMENTO|LANCHE"
        }
        """
        try:
            data = self.parse_body(request)

            output = self.get_service('atualizar_categoria_service').execute(
                pk,
                AtualizarCategoriaInputDTO.from_dict(data),
            )

            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: str) -> JsonResponse:
        """Remove categoria e retorna o registro removido."""
        try:
            removida = self.get_service('remover_categoria_service').execute(pk)

            logger.info(f"API: Categoria {pk} removida")

            return json_response(success=True, data=removida.to_dict())

        except Exception as e:
            return self.handle_exception(e)
