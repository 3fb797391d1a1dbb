"""
API Views JSON para o domínio de Produtos.

Endpoints:
- GET /produtos/ - Listar produtos
- POST /produtos/ - Criar produto
- GET /produtos/<id>/ - Obter produto
- PUT /produtos/<id>/ - Atualizar produto
- DELETE /produtos/<id>/ - Remover produto
- GET /produtos/categoria/<categoria_id>/ - Produtos de uma categoria
- GET /produtos/nome/<nome>/ - Busca por nome
"""

import logging

from django.http import JsonResponse, HttpRequest

from src.core.produtos.dtos import ProdutoInputDTO

from ..shared.api import BaseAPIView, json_response

logger = logging.getLogger(__name__)


class ProdutoAPIListView(BaseAPIView):
    """
    API para listar e criar produtos.

    GET /produtos/ - Lista produtos
    POST /produtos/ - Cria produto
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        """Lista todos os produtos."""
        try:
            produtos = self.get_service('listar_produtos_service').execute()

            return json_response(
                success=True,
                data=[p.to_dict() for p in produtos],
                meta={'total': len(produtos)},
            )

        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Cria novo produto.

        Body JSON:
        {
            "nome": "string",
            "categoria_id": "uuid (opcional)",
            "tempo_preparo": 120,
            "preco": 7.5,
            "descricao": "string (opcional)",
            "imagem": "url (opcional)"
        }
        """
        try:
            data = self.parse_body(request)

            output = self.get_service('criar_produto_service').execute(
                ProdutoInputDTO.from_dict(data)
            )

            logger.info(f"API: Produto criado: {output.id}")

            return json_response(
                success=True,
                data=output.to_dict(),
                status=201
            )

        except Exception as e:
            return self.handle_exception(e)


class ProdutoAPIDetailView(BaseAPIView):
    """
    API para operações em produto específico.
    """

    def get(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            produto = self.get_service('obter_produto_service').execute(pk)

            return json_response(success=True, data=produto.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: str) -> JsonResponse:
        """
        Atualiza produto. Campos ausentes mantêm o valor atual.
        """
        try:
            data = self.parse_body(request)

            output = self.get_service('atualizar_produto_service').execute(
                pk,
                ProdutoInputDTO.from_dict(data),
            )

            return json_response(success=True, data=output.to_dict())

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            removido = self.get_service('remover_produto_service').execute(pk)

            logger.info(f"API: Produto {pk} removido")

            return json_response(success=True, data=removido.to_dict())

        except Exception as e:
            return self.handle_exception(e)


class ProdutoAPIPorCategoriaView(BaseAPIView):
    """
    GET /produtos/categoria/<categoria_id>/

    Categoria sem produtos responde 404.
    """

    def get(self, request: HttpRequest, categoria_id: str) -> JsonResponse:
        try:
            produtos = self.get_service('listar_produtos_por_categoria_service').execute(categoria_id)

            return json_response(
                success=True,
                data=[p.to_dict() for p in produtos],
                meta={'total': len(produtos)},
            )

        except Exception as e:
            return self.handle_exception(e)


class ProdutoAPIPorNomeView(BaseAPIView):
    """
    GET /produtos/nome/<nome>/

    Nenhum resultado responde 200 com lista vazia.
    """

    def get(self, request: HttpRequest, nome: str) -> JsonResponse:
        try:
            produtos = self.get_service('buscar_produtos_por_nome_service').execute(nome)

            return json_response(
                success=True,
                data=[p.to_dict() for p in produtos],
                meta={'total': len(produtos)},
            )

        except Exception as e:
            return self.handle_exception(e)
