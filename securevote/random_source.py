# --------------------------------------------------------------
# File: random_source.py
# Description: Fuente de bytes aleatorios criptográficamente seguros.
# --------------------------------------------------------------
"""Acceso al CSPRNG del sistema operativo."""

import os

from securevote.errors import EntropyUnavailable


def random_bytes(n: int) -> bytes:
    """Devuelve `n` bytes del generador seguro del sistema operativo.

    `os.urandom` no comparte estado entre llamadas, por lo que es seguro
    usarlo desde varios hilos a la vez.

    Args:
        n (int): Número de bytes solicitados (no negativo).

    Returns:
        bytes: Secuencia aleatoria de longitud `n`.

    Raises:
        ValueError: Si `n` es negativo.
        EntropyUnavailable: Si el sistema no puede proporcionar entropía.

    """

    if n < 0:
        raise ValueError("n debe ser no negativo")
    try:
        return os.urandom(n)
    except (OSError, NotImplementedError) as exc:
        raise EntropyUnavailable("Fuente de entropía del sistema no disponible.") from exc
