#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Configura Django settings
2. Cria banco de dados SQLite
3. Executa migrations
4. Cria categorias e produtos de exemplo (opcional)

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
"""

import os
import sys
import argparse
from decimal import Decimal

# Adicionar raiz do projeto ao path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def setup_django():
    """Configura Django para uso standalone."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')

    # URL não-PostgreSQL cai no fallback SQLite
    os.environ['DATABASE_URL'] = 'sqlite:///db.sqlite3'

    import django
    django.setup()


def run_migrations():
    """Executa migrations."""
    from django.core.management import call_command

    print("📦 Executando migrations...")
    call_command('migrate', verbosity=1)
    print("✅ Migrations concluídas!")


SAMPLE_DATA = [
    ('Bebidas', 'BEBIDA', [
        {'nome': 'Coca-Cola', 'preco': Decimal('7.50'), 'tempo_preparo': 0},
        {'nome': 'Suco de Laranja', 'preco': Decimal('9.00'), 'tempo_preparo': 180},
    ]),
    ('Lanches', 'LANCHE', [
        {'nome': 'X-Burger', 'preco': Decimal('24.90'), 'tempo_preparo': 600,
         'descricao': 'Pão, hambúrguer, queijo e salada'},
        {'nome': 'X-Bacon', 'preco': Decimal('28.90'), 'tempo_preparo': 720},
    ]),
    ('Acompanhamentos', 'ACOMPANHAMENTO', [
        {'nome': 'Batata Frita', 'preco': Decimal('12.00'), 'tempo_preparo': 300},
    ]),
    ('Sobremesas', 'SOBREMESA', [
        {'nome': 'Sorvete de Chocolate', 'preco': Decimal('10.00'), 'tempo_preparo': 60},
    ]),
]


def create_sample_data():
    """Cria cardápio de exemplo através dos use cases."""
    from src.config.container import get_container
    from src.core.categorias.dtos import CriarCategoriaInputDTO
    from src.core.produtos.dtos import ProdutoInputDTO

    container = get_container()
    criar_categoria = container.criar_categoria_service()
    criar_produto = container.criar_produto_service()

    print("📝 Criando cardápio de exemplo...")

    total = 0
    for nome, tipo, produtos in SAMPLE_DATA:
        categoria = criar_categoria.execute(CriarCategoriaInputDTO(nome=nome, tipo=tipo))
        print(f"   ✓ {categoria.nome} ({categoria.tipo})")

        for produto in produtos:
            criar_produto.execute(ProdutoInputDTO(categoria_id=categoria.id, **produto))
            print(f"      - {produto['nome']}")
            total += 1

    print(f"✅ {len(SAMPLE_DATA)} categorias e {total} produtos criados!")


def check_connection():
    """Verifica conexão com o banco."""
    from src.adapters.django_app.shared.health import check_database_connection

    print("🔍 Verificando conexão com o banco...")

    info = check_database_connection()
    if info["healthy"]:
        print(f"✅ Conexão OK! ({info['engine']})")
    else:
        print(f"❌ Erro de conexão: {info['error']}")
    return info["healthy"]


def show_info():
    """Mostra informações do setup."""
    from django.conf import settings

    print("\n" + "=" * 60)
    print("📊 Informações do Setup")
    print("=" * 60)
    print(f"  Database Engine: {settings.DATABASES['default']['ENGINE']}")
    print(f"  Database Name: {settings.DATABASES['default']['NAME']}")
    print(f"  Debug Mode: {settings.DEBUG}")
    print("=" * 60)
    print("\n🚀 Próximos passos:")
    print("   1. django-admin runserver --settings=src.config.settings --pythonpath=.")
    print("   2. Acesse: http://localhost:8000/categorias/")
    print("   3. Acesse: http://localhost:8000/produtos/")
    print("\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desenvolvimento')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Criar cardápio de exemplo'
    )
    parser.add_argument(
        '--check-only',
        action='store_true',
        help='Apenas verificar conexão'
    )

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("🔧 Catálogo do Cardápio - Quick Setup")
    print("=" * 60 + "\n")

    setup_django()

    if args.check_only:
        check_connection()
        return

    if not check_connection():
        print("\n⚠️  Certifique-se de que o banco de dados está rodando.")
        return

    run_migrations()

    if args.with_sample_data:
        create_sample_data()

    show_info()


if __name__ == '__main__':
    main()
