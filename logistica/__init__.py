"""
Logística API - Clientes, camiones y días de entrega
"""
__version__ = "1.0.0"
