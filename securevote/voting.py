# --------------------------------------------------------------
# File: voting.py
# Description: Preparación de un voto: validación, cifrado, huellas y anclaje.
# --------------------------------------------------------------
"""Flujo compuesto que entrega las huellas al servicio de anclaje."""

from __future__ import annotations

import logging

from securevote.crypto_sym import encrypt_ballot
from securevote.errors import InvalidFormat, TokenAlreadyUsed
from securevote.hash_registry import ballot_hash, token_hash
from securevote.ledger import LedgerAnchor, TokenRegistry
from securevote.models import VoteReceipt
from securevote.tokens import canonicalize_token

logger = logging.getLogger(__name__)


def prepare_vote(
    token: str,
    ballot: str,
    *,
    registry: TokenRegistry,
    ledger: LedgerAnchor,
) -> VoteReceipt:
    """Valida el token, cifra la papeleta y ancla ambas huellas.

    Args:
        token (str): Token de un solo uso entregado al votante.
        ballot (str): Contenido de la papeleta en claro.
        registry (TokenRegistry): Registro de tokens consumidos.
        ledger (LedgerAnchor): Servicio de anclaje de huellas.

    Returns:
        VoteReceipt: Huellas, referencia de transacción y material de
        cifrado que el votante debe custodiar.

    Raises:
        InvalidFormat: Si el token no es válido o la papeleta está vacía.
        TokenAlreadyUsed: Si el registro indica que el token ya se usó.
        EncryptionFailure: Si el cifrado falla.

    """

    canonical = canonicalize_token(token)
    if not ballot:
        raise InvalidFormat("La papeleta no puede estar vacía.")

    t_hash = token_hash(canonical)
    if registry.is_used(t_hash):
        logger.info("Token rechazado por estar ya usado: %s", t_hash)
        raise TokenAlreadyUsed("Este token ya se ha utilizado.")

    encrypted = encrypt_ballot(ballot)
    b_hash = ballot_hash(encrypted.ciphertext)

    # Los errores del servicio de anclaje se propagan sin reintentos.
    transaction_ref = ledger.anchor(t_hash, b_hash)
    logger.info("Voto anclado token_hash=%s ballot_hash=%s", t_hash, b_hash)

    return VoteReceipt(
        ballot_hash=b_hash,
        token_hash=t_hash,
        transaction_ref=transaction_ref,
        encryption=encrypted,
    )
