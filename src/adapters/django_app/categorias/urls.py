"""
URL patterns para o domínio de Categorias.

Endpoints API JSON:
- GET /categorias/ - Listar categorias
- POST /categorias/ - Criar categoria
- GET /categorias/<id>/ - Obter categoria
- PUT /categorias/<id>/ - Atualizar categoria
- DELETE /categorias/<id>/ - Remover categoria
"""

from django.urls import path
from . import api_views

app_name = 'categorias'

urlpatterns = [
    path('', api_views.CategoriaAPIListView.as_view(), name='list'),
    path('<str:pk>/', api_views.CategoriaAPIDetailView.as_view(), name='detail'),
]
