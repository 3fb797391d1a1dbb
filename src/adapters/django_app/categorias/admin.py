"""
Django Admin para o domínio de Categorias.
"""

from django.contrib import admin

from .models import CategoriaModel


@admin.register(CategoriaModel)
class CategoriaAdmin(admin.ModelAdmin):
    """Admin para CategoriaModel."""

    list_display = ['nome', 'tipo', 'criado_em', 'atualizado_em']
    list_filter = ['tipo']
    search_fields = ['nome']
    readonly_fields = ['id', 'criado_em', 'atualizado_em']
    ordering = ['criado_em']
