# --------------------------------------------------------------
# File: tokens.py
# Description: Generación y validación de tokens de voto de un solo uso.
# --------------------------------------------------------------
"""Servicio de tokens de voto de 256 bits."""

from __future__ import annotations

import logging
import re
from concurrent.futures import ThreadPoolExecutor
from typing import Iterator, List, Optional

from securevote import config
from securevote.errors import InvalidFormat, InvalidTokenCount
from securevote.hexcodec import hex_decode, hex_encode
from securevote.models import TokenRecord
from securevote.random_source import random_bytes

logger = logging.getLogger(__name__)

TOKEN_BYTES = 32
TOKEN_PATTERN = re.compile(r"0x[0-9a-fA-F]{64}")
HASH_PATTERN = TOKEN_PATTERN


def generate_token() -> str:
    """Genera un token de 32 bytes aleatorios en formato `0x` + 64 hex."""

    return hex_encode(random_bytes(TOKEN_BYTES))


def _check_count(count: int) -> None:
    if not isinstance(count, int) or isinstance(count, bool):
        raise InvalidTokenCount("La cantidad de tokens debe ser un entero.")
    if count < 0 or count > config.MAX_TOKEN_BATCH:
        raise InvalidTokenCount(
            f"La cantidad de tokens debe estar entre 0 y {config.MAX_TOKEN_BATCH}."
        )


def _chunk_sizes(count: int, chunk_size: Optional[int] = None) -> List[int]:
    """Valida cantidad y tamaño de bloque y devuelve el tamaño de cada bloque."""

    _check_count(count)
    size = config.TOKEN_CHUNK_SIZE if chunk_size is None else chunk_size
    if not isinstance(size, int) or isinstance(size, bool) or size <= 0:
        raise InvalidTokenCount("El tamaño de bloque debe ser un entero positivo.")
    return [min(size, count - start) for start in range(0, count, size)]


def _generate_chunk(n: int) -> List[str]:
    return [generate_token() for _ in range(n)]


def _generate_chunks(sizes: List[int], count: int) -> Iterator[List[str]]:
    produced = 0
    for n in sizes:
        yield _generate_chunk(n)
        produced += n
        logger.debug("Generados %d/%d tokens", produced, count)


def iter_tokens(count: int, chunk_size: Optional[int] = None) -> Iterator[List[str]]:
    """Genera tokens por bloques para no bloquear a un llamador interactivo.

    La validación ocurre en la llamada, antes de obtener el primer bloque.
    Cada bloque se obtiene de extracciones independientes; abandonar el
    iterador descarta los tokens pendientes sin más efectos.

    Args:
        count (int): Número total de tokens a generar.
        chunk_size (Optional[int]): Tamaño de cada bloque; por defecto
            `config.TOKEN_CHUNK_SIZE`.

    Returns:
        Iterator[List[str]]: Bloques de tokens, el último posiblemente más corto.

    Raises:
        InvalidTokenCount: Si `count` o `chunk_size` están fuera de rango.

    """

    return _generate_chunks(_chunk_sizes(count, chunk_size), count)


def generate_tokens(count: int, *, workers: Optional[int] = None) -> List[str]:
    """Genera `count` tokens independientes.

    Args:
        count (int): Número de tokens (0..`config.MAX_TOKEN_BATCH`).
        workers (Optional[int]): Si se indica, reparte los bloques entre
            hilos; el orden del resultado no tiene significado.

    Returns:
        List[str]: Tokens canónicos en minúsculas.

    Raises:
        InvalidTokenCount: Si `count` o `config.TOKEN_CHUNK_SIZE` están fuera
            de rango.

    """

    sizes = _chunk_sizes(count)
    if workers and workers > 1 and len(sizes) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            chunks = list(pool.map(_generate_chunk, sizes))
    else:
        chunks = list(_generate_chunks(sizes, count))
    tokens = [token for chunk in chunks for token in chunk]
    logger.info("Lote de %d tokens generado", len(tokens))
    return tokens


def issue_token_batch(count: int) -> List[TokenRecord]:
    """Emite un lote de tokens numerados `token-1..token-N` sin usar."""

    return [
        TokenRecord(id=f"token-{index}", token=token)
        for index, token in enumerate(generate_tokens(count), start=1)
    ]


def is_valid_format(value: str) -> bool:
    """Indica si `value` es `0x` seguido de 64 hex (sin distinguir mayúsculas)."""

    return isinstance(value, str) and TOKEN_PATTERN.fullmatch(value) is not None


def is_valid_hash_format(value: str) -> bool:
    """Indica si `value` tiene el formato de una huella SHA-256 hexadecimal."""

    return isinstance(value, str) and HASH_PATTERN.fullmatch(value) is not None


def canonicalize_token(value: str) -> str:
    """Valida el token y devuelve su forma canónica en minúsculas.

    Raises:
        InvalidFormat: Si el token no cumple el formato.

    """

    if not is_valid_format(value):
        raise InvalidFormat("Formato de token inválido: se esperaba 0x + 64 hex.")
    return "0x" + value[2:].lower()


def assess_entropy(token: str) -> bool:
    """Comprobación heurística de diversidad de bytes de un token.

    Calcula `bytes_distintos / 32` y exige un ratio mínimo de
    `config.ENTROPY_THRESHOLD` (0.7 por defecto). No es un estimador de
    entropía criptográfica: puede rechazar tokens legítimos con poca
    diversidad y aceptar tokens construidos con diversidad moderada. Sirve
    solo como diagnóstico, nunca como garantía de seguridad.

    Args:
        token (str): Token en formato `0x` + 64 hex.

    Returns:
        bool: ``True`` si el ratio alcanza el umbral; ``False`` si no, o si
        el formato no es válido.

    """

    if not is_valid_format(token):
        return False
    raw = hex_decode(token)
    return len(set(raw)) / len(raw) >= config.ENTROPY_THRESHOLD
