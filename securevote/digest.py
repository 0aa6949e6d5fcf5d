# --------------------------------------------------------------
# File: digest.py
# Description: Huella SHA-256 de contenido binario.
# --------------------------------------------------------------
"""Funciones puras de resumen criptográfico."""

import hashlib

from securevote.hexcodec import hex_encode

DIGEST_SIZE = 32


def sha256(data: bytes) -> bytes:
    """Calcula el digest SHA-256 (32 bytes) de `data`."""

    return hashlib.sha256(data).digest()


def sha256_hex(data: bytes) -> str:
    """Calcula el digest SHA-256 de `data` en formato `0x` + 64 hex."""

    return hex_encode(sha256(data))
