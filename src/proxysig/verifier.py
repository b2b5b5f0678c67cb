"""
Verification of proxy signatures.

A signature σ on message m verifies when

    σ * G == H(m) * (Q_B + Q_A + (w * x(P)) * P) + Q_B

where Q_A and Q_B are the original and proxy signers' public keys, P is the
warrant point and w the permission weight. For an honest signature
σ = (d_B + s) * H(m) + d_B, and s * G = Q_A + (w * x(P)) * P by construction
of the delegation, so both sides agree.

A mismatch is reported as False, never as an exception.
"""

import logging
from .delegation import warrant_challenge
from .point import Point, G
from .signer import message_hash

logger = logging.getLogger(__name__)


def check_signature(
    message: bytes,
    proxy_public_key: Point,
    original_public_key: Point,
    signed: int,
    warrant_point: Point,
    weight: int,
) -> bool:
    """
    Verify a proxy signature.

    Parameters:
    message (bytes): The signed message.
    proxy_public_key (Point): The proxy signer's public key Q_B.
    original_public_key (Point): The original signer's public key Q_A.
    signed (int): The signature scalar σ.
    warrant_point (Point): The warrant point P of the delegation.
    weight (int): The permission weight w of the delegation.

    Returns:
    bool: True if the signature is valid, False otherwise.
    """
    if warrant_point.is_zero():
        return False

    # σ * G
    left = signed * G
    # H(m)
    h = message_hash(message)
    # (w * x(P)) * P
    challenge = warrant_challenge(warrant_point, weight)
    # Q_B + Q_A + (w * x(P)) * P
    combined = proxy_public_key + original_public_key + challenge
    # H(m) * combined + Q_B
    right = h * combined + proxy_public_key

    valid = left == right
    logger.debug("Signature check %s", "passed" if valid else "failed")
    return valid
