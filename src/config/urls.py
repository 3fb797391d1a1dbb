"""
URL Configuration do Catálogo.

Estrutura:
- /admin/ - Django Admin
- /categorias/ - API de Categorias
- /produtos/ - API de Produtos
- /health/ - Verificação de saúde (banco)
"""

from django.contrib import admin
from django.urls import path, include

from src.adapters.django_app.shared.health import HealthView

urlpatterns = [
    # Django Admin
    path('admin/', admin.site.urls),

    path('categorias/', include('src.adapters.django_app.categorias.urls')),
    path('produtos/', include('src.adapters.django_app.produtos.urls')),

    # Health check
    path('health/', HealthView.as_view(), name='health'),
]
