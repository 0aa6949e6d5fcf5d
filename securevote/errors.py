# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones del núcleo de cifrado de votos.
# --------------------------------------------------------------
"""Excepciones estructuradas que el núcleo devuelve a la capa de interfaz.

Ninguna operación reintenta ni recupera en silencio: cada fallo se propaga
al llamador con uno de estos tipos.
"""


class SecureVoteError(Exception):
    """Excepción base de todos los errores del paquete."""


class EntropyUnavailable(SecureVoteError):
    """El generador aleatorio del sistema operativo no está disponible (fatal)."""


class InvalidFormat(SecureVoteError):
    """La entrada proporcionada por el llamador no tiene el formato esperado."""


class MalformedHex(InvalidFormat):
    """Cadena hexadecimal con longitud impar o caracteres no hexadecimales."""


class InvalidTokenCount(InvalidFormat):
    """Cantidad de tokens solicitada fuera del rango permitido."""


class EncryptionFailure(SecureVoteError):
    """Fallo genérico de cifrado; no expone la causa interna."""

    def __init__(self, message: str = "No se ha podido cifrar la papeleta.") -> None:
        super().__init__(message)


class DecryptionFailure(SecureVoteError):
    """Fallo genérico de descifrado.

    Se lanza igual con clave errónea, iv erróneo, ciphertext manipulado o
    entrada mal formada, de modo que no actúa como oráculo.
    """

    def __init__(self, message: str = "No se ha podido descifrar la papeleta.") -> None:
        super().__init__(message)


class TokenAlreadyUsed(SecureVoteError):
    """El registro de tokens indica que el token ya se consumió."""
