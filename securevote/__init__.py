# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del núcleo de cifrado de votos.
# --------------------------------------------------------------
"""Inicializa el paquete `securevote` y documenta sus módulos principales."""

__all__ = [
    "config",
    "crypto_sym",
    "digest",
    "errors",
    "hash_registry",
    "hexcodec",
    "ledger",
    "models",
    "random_source",
    "tokens",
    "voting",
]
