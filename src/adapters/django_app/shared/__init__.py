"""
Infraestrutura compartilhada entre os apps Django (repositório base, API base, health).
"""
