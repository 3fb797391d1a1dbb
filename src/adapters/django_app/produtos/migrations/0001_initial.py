"""
Migration inicial para o domínio de Produtos.

Cria a tabela:
- produtos
"""

from django.db import migrations, models
import django.db.models.deletion
import uuid


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
        ('categorias', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='ProdutoModel',
            fields=[
                ('id', models.UUIDField(
                    default=uuid.uuid4,
                    editable=False,
                    primary_key=True,
                    serialize=False,
                    help_text='UUID único do produto'
                )),
                ('nome', models.CharField(
                    max_length=200,
                    db_index=True,
                    help_text='Nome do produto'
                )),
                ('tempo_preparo', models.PositiveIntegerField(
                    blank=True,
                    null=True,
                    help_text='Tempo de preparo em segundos'
                )),
                ('preco', models.DecimalField(
                    blank=True,
                    decimal_places=2,
                    max_digits=10,
                    null=True,
                    help_text='Preço de venda'
                )),
                ('descricao', models.TextField(
                    blank=True,
                    null=True,
                    help_text='Descrição do produto'
                )),
                ('imagem', models.CharField(
                    blank=True,
                    max_length=500,
                    null=True,
                    help_text='URL da imagem do produto'
                )),
                ('criado_em', models.DateTimeField(
                    auto_now_add=True,
                    help_text='Data/hora de criação'
                )),
                ('atualizado_em', models.DateTimeField(
                    auto_now=True,
                    help_text='Data/hora da última atualização'
                )),
                ('categoria', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='produtos',
                    to='categorias.categoriamodel',
                    help_text='Categoria do produto'
                )),
            ],
            options={
                'db_table': 'produtos',
                'verbose_name': 'Produto',
                'verbose_name_plural': 'Produtos',
                'ordering': ['criado_em'],
            },
        ),
        migrations.AddIndex(
            model_name='produtomodel',
            index=models.Index(fields=['categoria', 'criado_em'], name='produtos_cat_criado_idx'),
        ),
    ]
