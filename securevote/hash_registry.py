# --------------------------------------------------------------
# File: hash_registry.py
# Description: Derivación de huellas de papeleta, token y escrutinio.
# --------------------------------------------------------------
"""Huellas que se publican en el registro de auditoría.

Convenciones canónicas:

- La huella de papeleta se calcula sobre los bytes crudos del ciphertext
  (hex decodificado, tag incluido), nunca sobre su texto hexadecimal.
- La huella de token se calcula sobre los 32 bytes crudos del token
  canónico, por lo que mayúsculas y minúsculas producen la misma huella.
- La huella de escrutinio se calcula sobre JSON canónico con claves
  ordenadas.
"""

import hmac
import json
from typing import Any, Dict

from securevote.digest import sha256_hex
from securevote.errors import InvalidFormat
from securevote.hexcodec import hex_decode
from securevote.tokens import canonicalize_token, is_valid_hash_format


def ballot_hash(ciphertext_hex: str) -> str:
    """Huella SHA-256 de los bytes crudos del ciphertext.

    Raises:
        MalformedHex: Si el ciphertext no es hexadecimal válido.

    """

    return sha256_hex(hex_decode(ciphertext_hex))


def token_hash(token: str) -> str:
    """Huella SHA-256 de los 32 bytes crudos de un token válido.

    Raises:
        InvalidFormat: Si el token no cumple el formato.

    """

    return sha256_hex(hex_decode(canonicalize_token(token)))


def _check_keys(value: Any) -> None:
    """Exige claves de texto en todos los objetos, también los anidados."""

    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"Clave no textual en el registro: {key!r}")
            _check_keys(item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            _check_keys(item)


def canonical_json_bytes(payload: Dict[str, Any]) -> bytes:
    """Serializa un diccionario JSON de manera determinista.

    Args:
        payload (Dict[str, Any]): Registro de escrutinio.

    Returns:
        bytes: Representación JSON canonizada en UTF-8.

    Raises:
        TypeError: Si hay claves no textuales o valores no serializables.
        ValueError: Si hay valores NaN o infinitos, que no son JSON válido.

    """

    # json.dumps convertiría 1 en "1" y dos registros distintos colisionarían.
    _check_keys(payload)
    # Claves ordenadas (también en objetos anidados) y sin espacios.
    return json.dumps(
        payload,
        separators=(",", ":"),
        sort_keys=True,
        ensure_ascii=False,
        allow_nan=False,
    ).encode("utf-8")


def tally_hash(tally_record: Dict[str, Any]) -> str:
    """Huella SHA-256 del registro de escrutinio, independiente del orden de claves.

    Raises:
        InvalidFormat: Si el registro no es serializable a JSON.

    """

    try:
        payload = canonical_json_bytes(tally_record)
    except (TypeError, ValueError) as exc:
        raise InvalidFormat("El registro de escrutinio no es serializable a JSON.") from exc
    return sha256_hex(payload)


def verify_ballot_hash(ciphertext_hex: str, expected_hash: str) -> bool:
    """Comprueba que un ciphertext coincide con una huella anclada.

    Args:
        ciphertext_hex (str): Ciphertext en hexadecimal.
        expected_hash (str): Huella publicada en el registro de auditoría.

    Returns:
        bool: ``True`` si la huella coincide; ``False`` en caso contrario.

    Raises:
        InvalidFormat: Si `expected_hash` no tiene formato de huella.

    """

    if not is_valid_hash_format(expected_hash):
        raise InvalidFormat("Formato de huella inválido: se esperaba 0x + 64 hex.")
    actual = ballot_hash(ciphertext_hex)
    return hmac.compare_digest(actual, "0x" + expected_hash[2:].lower())
