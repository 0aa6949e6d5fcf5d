# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan estructuras de intercambio criptográfico."""

import re

from pydantic import BaseModel, field_validator

_LOWER_HEX = re.compile(r"0x[0-9a-f]*")

IV_HEX_LEN = 2 + 12 * 2
KEY_HEX_LEN = 2 + 32 * 2
TAG_HEX_LEN = 16 * 2


def _check_hex(value: str, field: str) -> str:
    if not _LOWER_HEX.fullmatch(value) or len(value) % 2:
        raise ValueError(f"{field} debe ser hexadecimal en minúsculas con prefijo 0x")
    return value


class EncryptionResult(BaseModel):
    """Representa el resultado de cifrar una papeleta con AES-GCM.

    Attributes:
        ciphertext (str): Datos cifrados con la etiqueta de 128 bits al final.
        iv (str): Nonce de 96 bits utilizado durante el cifrado.
        key (str): Clave AES-256 exportada en bruto.

    """

    ciphertext: str
    iv: str
    key: str

    @field_validator("ciphertext")
    @classmethod
    def _ciphertext_has_tag(cls, value: str) -> str:
        _check_hex(value, "ciphertext")
        if len(value) - 2 < TAG_HEX_LEN:
            raise ValueError("ciphertext debe incluir la etiqueta de 16 bytes")
        return value

    @field_validator("iv")
    @classmethod
    def _iv_is_96_bits(cls, value: str) -> str:
        _check_hex(value, "iv")
        if len(value) != IV_HEX_LEN:
            raise ValueError("iv debe tener exactamente 12 bytes")
        return value

    @field_validator("key")
    @classmethod
    def _key_is_256_bits(cls, value: str) -> str:
        _check_hex(value, "key")
        if len(value) != KEY_HEX_LEN:
            raise ValueError("key debe tener exactamente 32 bytes")
        return value


class TokenRecord(BaseModel):
    """Fila de un lote de tokens emitido durante la configuración de la elección."""

    id: str
    token: str
    used: bool = False


class VoteReceipt(BaseModel):
    """Comprobante devuelto tras preparar y anclar un voto.

    Attributes:
        ballot_hash (str): Huella del ciphertext registrado.
        token_hash (str): Huella del token consumido.
        transaction_ref (str): Referencia opaca devuelta por el libro mayor.
        encryption (EncryptionResult): Material que el votante debe custodiar.

    """

    ballot_hash: str
    token_hash: str
    transaction_ref: str
    encryption: EncryptionResult
