"""
App Django de Produtos.
"""
