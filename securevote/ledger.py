# --------------------------------------------------------------
# File: ledger.py
# Description: Contratos de los servicios externos de anclaje y registro de tokens.
# --------------------------------------------------------------
"""Interfaces de los colaboradores externos consumidos por el núcleo.

El núcleo no implementa el libro mayor ni el registro de tokens usados;
solo produce y valida los valores que estos servicios reciben.
"""

from typing import Protocol


class LedgerAnchor(Protocol):
    """Servicio que registra pares de huellas y devuelve una referencia opaca."""

    def anchor(self, token_hash: str, ballot_hash: str) -> str:
        """Registra `(token_hash, ballot_hash)` y devuelve la referencia de transacción."""
        ...


class TokenRegistry(Protocol):
    """Registro de consumo de tokens consultado antes de aceptar un voto."""

    def is_used(self, token_hash: str) -> bool:
        """Indica si el token con esa huella ya se ha consumido."""
        ...
