# --------------------------------------------------------------
# File: hexcodec.py
# Description: Conversión entre bytes y texto hexadecimal con prefijo 0x.
# --------------------------------------------------------------
"""Codificación hexadecimal usada en todas las fronteras del núcleo."""

import re

from securevote.errors import MalformedHex

PREFIX = "0x"
_HEX_BODY = re.compile(r"[0-9a-fA-F]*")


def hex_encode(data: bytes) -> str:
    """Codifica bytes como `0x` seguido de hexadecimal en minúsculas."""

    return PREFIX + bytes(data).hex()


def strip_prefix(value: str) -> str:
    """Elimina un único prefijo `0x`/`0X` si existe."""

    if value[:2] in ("0x", "0X"):
        return value[2:]
    return value


def hex_decode(value: str) -> bytes:
    """Decodifica texto hexadecimal con prefijo `0x` opcional.

    Args:
        value (str): Cadena hexadecimal; admite mayúsculas.

    Returns:
        bytes: Datos binarios representados por la cadena.

    Raises:
        MalformedHex: Si la longitud es impar o hay caracteres no hexadecimales.

    """

    if not isinstance(value, str):
        raise MalformedHex("Se esperaba una cadena hexadecimal.")
    body = strip_prefix(value)
    if len(body) % 2:
        raise MalformedHex("Longitud hexadecimal impar.")
    # fullmatch en lugar de bytes.fromhex, que tolera espacios en blanco
    if not _HEX_BODY.fullmatch(body):
        raise MalformedHex("La cadena contiene caracteres no hexadecimales.")
    return bytes.fromhex(body)
