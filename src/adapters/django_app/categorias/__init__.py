"""
App Django de Categorias.
"""
