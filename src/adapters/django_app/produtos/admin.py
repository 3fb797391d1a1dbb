"""
Django Admin para o domínio de Produtos.
"""

from django.contrib import admin

from .models import ProdutoModel


@admin.register(ProdutoModel)
class ProdutoAdmin(admin.ModelAdmin):
    """Admin para ProdutoModel."""

    list_display = ['nome', 'categoria', 'preco', 'tempo_preparo', 'criado_em']
    list_filter = ['categoria']
    search_fields = ['nome', 'descricao']
    readonly_fields = ['id', 'criado_em', 'atualizado_em']
    raw_id_fields = ['categoria']
    ordering = ['criado_em']
