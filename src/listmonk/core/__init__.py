"""Core: configuración, errores, dominio y codificación de parámetros.

No conoce httpx salvo en el contrato `interfaces.http`.
"""
