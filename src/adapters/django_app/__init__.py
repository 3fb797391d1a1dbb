"""
Adapters Django: apps de Categorias e Produtos e infraestrutura compartilhada.
"""
