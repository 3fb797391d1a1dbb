"""
Adapters - Implementações concretas das portas do Core.
"""
