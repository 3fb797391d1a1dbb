"""
Configuração do Django App para Produtos.
"""

from django.apps import AppConfig


class ProdutosConfig(AppConfig):
    """Configuração do app Produtos."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.produtos'
    label = 'produtos'
    verbose_name = 'Produtos do Cardápio'
