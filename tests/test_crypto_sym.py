# --------------------------------------------------------------
# File: test_crypto_sym.py
# Description: Pruebas del cifrado y descifrado de papeletas con AES-GCM.
# --------------------------------------------------------------

import os

import pytest

from securevote.crypto_sym import decrypt_ballot, encrypt_ballot
from securevote.errors import DecryptionFailure, EncryptionFailure, EntropyUnavailable
from securevote.hexcodec import hex_decode, hex_encode


def _flip_bit(value: str, bit: int) -> str:
    """Invierte un bit de un valor hexadecimal.

    Args:
        value (str): Valor en hexadecimal con prefijo 0x.
        bit (int): Índice del bit a invertir.

    Returns:
        str: Valor alterado en el mismo formato.
    """
    raw = bytearray(hex_decode(value))
    raw[bit // 8] ^= 1 << (bit % 8)
    return hex_encode(bytes(raw))


def test_candidate_a_scenario():
    """Comprueba el escenario básico de cifrado de la papeleta "Candidate A".

    Returns:
        None: Las aserciones revisan longitudes y el descifrado.
    """
    result = encrypt_ballot("Candidate A")
    assert len(hex_decode(result.iv)) == 12
    assert len(hex_decode(result.key)) == 32
    assert len(hex_decode(result.ciphertext)) == len("Candidate A") + 16
    assert decrypt_ballot(result.ciphertext, result.iv, result.key) == "Candidate A"

    other_key = encrypt_ballot("x").key
    with pytest.raises(DecryptionFailure):
        decrypt_ballot(result.ciphertext, result.iv, other_key)


@pytest.mark.parametrize(
    "plaintext",
    ["", "Candidata Ñandú", "候选人 B", "🗳️ voto", "a" * 4096],
)
def test_roundtrip_ok(plaintext):
    """Verifica que cualquier papeleta, incluida la vacía, se recupere intacta.

    Args:
        plaintext (str): Papeleta proporcionada por el parámetro.

    Returns:
        None: Se compara el texto recuperado.
    """
    result = encrypt_ballot(plaintext)
    assert decrypt_ballot(result.ciphertext, result.iv, result.key) == plaintext
    assert len(hex_decode(result.ciphertext)) == len(plaintext.encode("utf-8")) + 16


def test_fresh_key_and_iv_per_call():
    """Evalúa que clave y nonce no se repitan entre llamadas.

    Returns:
        None: Las aserciones verifican la unicidad dentro del muestreo.
    """
    results = [encrypt_ballot("x") for _ in range(200)]
    assert len({r.iv for r in results}) == 200
    assert len({r.key for r in results}) == 200


@pytest.mark.parametrize("field", ["ciphertext", "iv", "key"])
def test_single_bit_flip_is_detected(field):
    """Garantiza que invertir cualquier bit de ciphertext, iv o clave invalide el descifrado.

    Args:
        field (str): Campo que se altera.

    Returns:
        None: Se espera DecryptionFailure para cada bit probado.
    """
    result = encrypt_ballot("Candidate A").model_dump()
    total_bits = len(hex_decode(result[field])) * 8
    for bit in range(0, total_bits, 7):
        tampered = dict(result, **{field: _flip_bit(result[field], bit)})
        with pytest.raises(DecryptionFailure):
            decrypt_ballot(tampered["ciphertext"], tampered["iv"], tampered["key"])


@pytest.mark.parametrize(
    "ciphertext, iv, key",
    [
        ("0xzz", None, None),  # hex mal formado
        (None, "0x" + "00" * 11, None),  # iv corto
        (None, None, "0x" + "00" * 16),  # clave de 128 bits
        ("0x" + "00" * 15, None, None),  # sin tag completo
    ],
)
def test_malformed_inputs_fail_the_same_way(ciphertext, iv, key):
    """Comprueba que las entradas mal formadas produzcan el mismo fallo genérico.

    Returns:
        None: Se espera DecryptionFailure con el mensaje genérico.
    """
    result = encrypt_ballot("Candidate A")
    with pytest.raises(DecryptionFailure) as excinfo:
        decrypt_ballot(ciphertext or result.ciphertext, iv or result.iv, key or result.key)
    assert str(excinfo.value) == str(DecryptionFailure())
    assert excinfo.value.__cause__ is None


def test_failure_does_not_reveal_cause():
    """Verifica que clave, iv y ciphertext erróneos sean indistinguibles.

    Returns:
        None: Se comparan los mensajes de las tres excepciones.
    """
    result = encrypt_ballot("Candidate A")
    messages = set()
    for field in ("ciphertext", "iv", "key"):
        values = result.model_dump()
        values[field] = _flip_bit(values[field], 0)
        with pytest.raises(DecryptionFailure) as excinfo:
            decrypt_ballot(values["ciphertext"], values["iv"], values["key"])
        assert excinfo.value.__cause__ is None
        messages.add(str(excinfo.value))
    assert len(messages) == 1


def test_encrypt_rejects_non_text():
    with pytest.raises(EncryptionFailure):
        encrypt_ballot(b"bytes")


def test_encrypt_unencodable_text_is_generic_failure():
    with pytest.raises(EncryptionFailure):
        encrypt_ballot("\ud800")


def test_entropy_unavailable_is_not_masked(monkeypatch):
    """Verifica que la falta de entropía no se disfrace de fallo de cifrado.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para sustituir os.urandom.

    Returns:
        None: Se espera EntropyUnavailable y no EncryptionFailure.
    """

    def broken(n):
        raise OSError("no entropy")

    monkeypatch.setattr(os, "urandom", broken)
    with pytest.raises(EntropyUnavailable):
        encrypt_ballot("x")
