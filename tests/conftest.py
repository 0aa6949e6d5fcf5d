# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas con dobles de los servicios externos.
# --------------------------------------------------------------

from typing import Dict, List, Set, Tuple

import pytest

from securevote import config


class InMemoryRegistry:
    """Registro de tokens consumidos en memoria."""

    def __init__(self) -> None:
        self.used: Set[str] = set()
        self.queries: List[str] = []

    def is_used(self, token_hash: str) -> bool:
        self.queries.append(token_hash)
        return token_hash in self.used


class RecordingLedger:
    """Libro mayor falso que guarda cada par anclado."""

    def __init__(self) -> None:
        self.anchored: Dict[str, Tuple[str, str]] = {}

    def anchor(self, token_hash: str, ballot_hash: str) -> str:
        ref = f"tx-{len(self.anchored) + 1}"
        self.anchored[ref] = (token_hash, ballot_hash)
        return ref


@pytest.fixture(autouse=True)
def _default_limits(monkeypatch) -> None:
    """Fija los límites de configuración para que el entorno no afecte a las pruebas.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar atributos del módulo.
    """
    monkeypatch.setattr(config, "MAX_TOKEN_BATCH", 10000)
    monkeypatch.setattr(config, "TOKEN_CHUNK_SIZE", 500)
    monkeypatch.setattr(config, "ENTROPY_THRESHOLD", 0.7)


@pytest.fixture
def registry() -> InMemoryRegistry:
    return InMemoryRegistry()


@pytest.fixture
def ledger() -> RecordingLedger:
    return RecordingLedger()
