"""
Django Models para o domínio de Categorias.

Estes models são ADAPTERS - implementam a persistência para as
entidades definidas em src/core/categorias/entities.py.

IMPORTANTE:
- Models NÃO contêm lógica de negócio
- Models são mapeados para/de Entities via Mappers
"""

from django.db import models
import uuid


class CategoriaTipoChoices(models.TextChoices):
    """Choices para tipo de categoria (espelha CategoriaTipo do Core)."""
    BEBIDA = 'BEBIDA', 'Bebida'
    SOBREMESA = 'SOBREMESA', 'Sobremesa'
    ACOMPANHAMENTO = 'ACOMPANHAMENTO', 'Acompanhamento'
    LANCHE = 'LANCHE', 'Lanche'


class CategoriaModel(models.Model):
    """
    Model Django para persistência de Categorias.

    Fields:
        id: UUID gerado na criação
        nome: Nome de exibição
        tipo: Tipo da categoria (choices)
        criado_em: Timestamp de criação
        atualizado_em: Timestamp de última atualização
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="UUID único da categoria"
    )

    nome = models.CharField(
        max_length=120,
        help_text="Nome de exibição da categoria"
    )

    tipo = models.CharField(
        max_length=20,
        choices=CategoriaTipoChoices.choices,
        db_index=True,
        help_text="Tipo da categoria"
    )

    criado_em = models.DateTimeField(
        auto_now_add=True,
        help_text="Data/hora de criação"
    )

    atualizado_em = models.DateTimeField(
        auto_now=True,
        help_text="Data/hora da última atualização"
    )

    class Meta:
        db_table = 'categorias'
        verbose_name = 'Categoria'
        verbose_name_plural = 'Categorias'
        ordering = ['criado_em']

    def __str__(self):
        return f"{self.nome} ({self.tipo})"

    def __repr__(self):
        return f"<CategoriaModel id={str(self.id)[:8]} tipo={self.tipo}>"
