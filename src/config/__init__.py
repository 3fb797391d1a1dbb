"""
Configuração do projeto Catálogo do Cardápio.

Módulos:
- settings: Configurações Django
- urls: Rotas principais
- wsgi: WSGI application
- container: Dependency Injection Container
"""
