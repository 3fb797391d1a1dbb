"""
URL patterns para o domínio de Produtos.

As rotas de filtro vêm antes da rota de detalhe.
"""

from django.urls import path
from . import api_views

app_name = 'produtos'

urlpatterns = [
    path('', api_views.ProdutoAPIListView.as_view(), name='list'),
    path('categoria/<str:categoria_id>/', api_views.ProdutoAPIPorCategoriaView.as_view(), name='por-categoria'),
    path('nome/<str:nome>/', api_views.ProdutoAPIPorNomeView.as_view(), name='por-nome'),
    path('<str:pk>/', api_views.ProdutoAPIDetailView.as_view(), name='detail'),
]
