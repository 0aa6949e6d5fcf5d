# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-GCM para cifrado y descifrado de papeletas.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico para proteger el contenido de los votos."""

import logging

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from securevote.errors import DecryptionFailure, EncryptionFailure, InvalidFormat
from securevote.hexcodec import hex_decode, hex_encode
from securevote.models import EncryptionResult
from securevote.random_source import random_bytes

logger = logging.getLogger(__name__)

KEY_BYTES = 32
NONCE_BYTES = 12
TAG_BYTES = 16


def encrypt_ballot(plaintext: str) -> EncryptionResult:
    """Cifra una papeleta con AES-256-GCM usando clave y nonce nuevos.

    Cada llamada extrae una clave de 256 bits y un nonce de 96 bits
    independientes, por lo que nunca se reutiliza un nonce con la misma clave.

    Args:
        plaintext (str): Contenido de la papeleta; se cifra su UTF-8.

    Returns:
        EncryptionResult: `ciphertext` (con tag de 128 bits), `iv` y `key`
        en hexadecimal con prefijo `0x`.

    Raises:
        EntropyUnavailable: Si no hay entropía para la clave o el nonce.
        EncryptionFailure: Si la primitiva rechaza los parámetros.

    """

    if not isinstance(plaintext, str):
        raise EncryptionFailure()
    key = random_bytes(KEY_BYTES)
    nonce = random_bytes(NONCE_BYTES)
    try:
        ct_full = AESGCM(key).encrypt(nonce, plaintext.encode("utf-8"), associated_data=None)
    except (ValueError, TypeError, OverflowError):
        logger.warning("Fallo al cifrar una papeleta")
        raise EncryptionFailure() from None
    return EncryptionResult(
        ciphertext=hex_encode(ct_full),
        iv=hex_encode(nonce),
        key=hex_encode(key),
    )


def decrypt_ballot(ciphertext_hex: str, iv_hex: str, key_hex: str) -> str:
    """Descifra y autentica una papeleta cifrada con :func:`encrypt_ballot`.

    Cualquier problema (hex mal formado, longitudes incorrectas, clave o iv
    erróneos, ciphertext o tag manipulados, UTF-8 inválido) produce el mismo
    `DecryptionFailure` sin causa encadenada.

    Args:
        ciphertext_hex (str): Ciphertext con la etiqueta al final.
        iv_hex (str): Nonce de 12 bytes.
        key_hex (str): Clave de 32 bytes.

    Returns:
        str: Papeleta original en claro.

    """

    try:
        ct_full = hex_decode(ciphertext_hex)
        nonce = hex_decode(iv_hex)
        key = hex_decode(key_hex)
        if len(key) != KEY_BYTES or len(nonce) != NONCE_BYTES or len(ct_full) < TAG_BYTES:
            raise InvalidFormat("Longitudes de clave, iv o ciphertext no válidas.")
        plaintext = AESGCM(key).decrypt(nonce, ct_full, associated_data=None)
        return plaintext.decode("utf-8")
    except (InvalidTag, InvalidFormat, ValueError):
        logger.warning("Fallo al descifrar una papeleta")
        raise DecryptionFailure() from None
