"""
Django Models para o domínio de Produtos.

Relacionamentos:
- ProdutoModel.categoria → CategoriaModel (opcional; SET_NULL ao remover categoria)
"""

from django.db import models
import uuid


class ProdutoModel(models.Model):
    """
    Model Django para persistência de Produtos.

    Fields:
        id: UUID gerado na criação
        nome: Nome do produto
        categoria: Categoria associada (opcional)
        tempo_preparo: Tempo de preparo em segundos
        preco: Preço de venda
        descricao: Descrição livre
        imagem: URL da imagem
        criado_em: Timestamp de criação
        atualizado_em: Timestamp de última atualização
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="UUID único do produto"
    )

    nome = models.CharField(
        max_length=200,
        db_index=True,
        help_text="Nome do produto"
    )

    categoria = models.ForeignKey(
        'categorias.CategoriaModel',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='produtos',
        help_text="Categoria do produto"
    )

    tempo_preparo = models.PositiveIntegerField(
        null=True,
        blank=True,
        help_text="Tempo de preparo em segundos"
    )

    preco = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        help_text="Preço de venda"
    )

    descricao = models.TextField(
        null=True,
        blank=True,
        help_text="Descrição do produto"
    )

    imagem = models.CharField(
        max_length=500,
        null=True,
        blank=True,
        help_text="URL da imagem do produto"
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
        db_table = 'produtos'
        verbose_name = 'Produto'
        verbose_name_plural = 'Produtos'
        ordering = ['criado_em']
        indexes = [
            models.Index(fields=['categoria', 'criado_em'], name='produtos_cat_criado_idx'),
        ]

    def __str__(self):
        return self.nome

    def __repr__(self):
        return f"<ProdutoModel id={str(self.id)[:8]} nome={self.nome}>"
