"""
Core Domain Layer - O Hexágono.

Regras do catálogo do cardápio (categorias e produtos), sem
dependência de Django ou de qualquer framework de persistência.
Testável com os repositórios InMemory de cada domínio.
"""
