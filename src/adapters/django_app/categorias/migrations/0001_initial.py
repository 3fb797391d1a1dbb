"""
Migration inicial para o domínio de Categorias.

Cria a tabela:
- categorias
"""

from django.db import migrations, models
import uuid


class Migration(migrations.Migration):
    """Migration inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='CategoriaModel',
            fields=[
                ('id', models.UUIDField(
                    default=uuid.uuid4,
                    editable=False,
                    primary_key=True,
                    serialize=False,
                    help_text='UUID único da categoria'
                )),
                ('nome', models.CharField(
                    max_length=120,
                    help_text='Nome de exibição da categoria'
                )),
                ('tipo', models.CharField(
                    max_length=20,
                    choices=[
                        ('BEBIDA', 'Bebida'),
                        ('SOBREMESA', 'Sobremesa'),
                        ('ACOMPANHAMENTO', 'Acompanhamento'),
                        ('LANCHE', 'Lanche'),
                    ],
                    db_index=True,
                    help_text='Tipo da categoria'
                )),
                ('criado_em', models.DateTimeField(
                    auto_now_add=True,
                    help_text='Data/hora de criação'
                )),
                ('atualizado_em', models.DateTimeField(
                    auto_now=True,
                    help_text='Data/hora da última atualização'
                )),
            ],
            options={
                'db_table': 'categorias',
                'verbose_name': 'Categoria',
                'verbose_name_plural': 'Categorias',
                'ordering': ['criado_em'],
            },
        ),
    ]
