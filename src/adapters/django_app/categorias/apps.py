"""
Configuração do Django App para Categorias.
"""

from django.apps import AppConfig


class CategoriasConfig(AppConfig):
    """Configuração do app Categorias."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.categorias'
    label = 'categorias'
    verbose_name = 'Categorias do Cardápio'
