"""
Configurações globais do Pytest para o Catálogo do Cardápio.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures e configurações compartilhadas:
- Django settings para testes (SQLite em memória)
- Repositórios InMemory e use cases montados sobre eles
"""

from decimal import Decimal
from pathlib import Path

import pytest


def pytest_configure(config):
    """Configura Django antes dos testes."""
    import django
    from django.conf import settings

    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )

    if not settings.configured:
        settings.configure(
            DEBUG=True,
            SECRET_KEY='test-secret-key',
            DATABASES={
                'default': {
                    'ENGINE': 'django.db.backends.sqlite3',
                    'NAME': ':memory:',
                }
            },
            INSTALLED_APPS=[
                'django.contrib.admin',
                'django.contrib.auth',
                'django.contrib.contenttypes',
                'django.contrib.sessions',
                'django.contrib.messages',
                'src.adapters.django_app.categorias',
                'src.adapters.django_app.produtos',
            ],
            ROOT_URLCONF='src.config.urls',
            MIDDLEWARE=[],
            TEMPLATES=[{
                'BACKEND': 'django.template.backends.django.DjangoTemplates',
                'DIRS': [],
                'APP_DIRS': True,
                'OPTIONS': {},
            }],
            DEFAULT_AUTO_FIELD='django.db.models.BigAutoField',
            USE_TZ=True,
            TIME_ZONE='America/Sao_Paulo',
        )
        django.setup()


@pytest.fixture(scope="session")
def project_root():
    """Retorna o caminho raiz do projeto."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def reset_di_container():
    """
    Reset do container global entre testes.

    Garante que cada teste inicia com repositórios novos.
    """
    from src.config.container import reset_container

    reset_container()
    yield
    reset_container()


# =============================================================================
# Repositórios e Use Cases InMemory
# =============================================================================

@pytest.fixture
def categoria_repo(produto_repo):
    from src.core.categorias.ports import InMemoryCategoriaRepository
    return InMemoryCategoriaRepository(produto_repo=produto_repo)


@pytest.fixture
def produto_repo():
    from src.core.produtos.ports import InMemoryProdutoRepository
    return InMemoryProdutoRepository()


@pytest.fixture
def obter_categoria(categoria_repo):
    from src.core.categorias.use_cases import ObterCategoriaService
    return ObterCategoriaService(categoria_repo)


@pytest.fixture
def categoria_bebida(categoria_repo):
    """Categoria BEBIDA já persistida no repositório InMemory."""
    from src.core.categorias.entities import CategoriaEntity, CategoriaTipo
    return categoria_repo.save(CategoriaEntity.criar("Bebidas", CategoriaTipo.BEBIDA))


@pytest.fixture
def produto_coca(produto_repo, categoria_bebida):
    """Produto persistido na categoria BEBIDA."""
    from src.core.produtos.entities import ProdutoEntity
    return produto_repo.save(
        ProdutoEntity.criar(
            nome="Coca-Cola",
            categoria_id=categoria_bebida.id,
            tempo_preparo=5,
            preco=Decimal("5.50"),
        )
    )
