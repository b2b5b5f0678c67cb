"""
This module implements the delegation step of the proxy signature scheme.

An original signer issues a Delegation (the warrant signature) that binds a
fresh ephemeral scalar, a permission weight, and the original signer's
private key. Anyone holding the original signer's public key can check that a
delegation was honestly constructed before a proxy signer accepts it.

For an honestly issued delegation there is an ephemeral scalar k such that

    warrant_point = k * G
    s = d_A + k * w * x(warrant_point)   (mod Q)

where d_A is the original signer's private key and w is the weight.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, NamedTuple
from .constants import Q
from .keys import random_scalar
from .point import Point, G

logger = logging.getLogger(__name__)


class Delegation(NamedTuple):
    """Warrant signature handed from the original signer to the proxy signer."""

    # P = k * G
    warrant_point: Point
    # s = d_A + k * w * x(P)
    s: int
    # w
    weight: int

    def to_dict(self) -> Dict[str, Any]:
        """
        Encode the delegation as a JSON-compatible dictionary. The warrant
        point is SEC 1 compressed hex and the scalar is 32-byte hex.
        """
        return {
            "warrant_point": self.warrant_point.sec_serialize().hex(),
            "s": (self.s % Q).to_bytes(32, "big").hex(),
            "weight": self.weight,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Delegation:
        """
        Decode a delegation produced by to_dict.

        Raises:
        ValueError: If a field is missing or cannot be decoded.
        """
        try:
            warrant_point = Point.sec_deserialize(data["warrant_point"])
            s = int(data["s"], 16)
            weight = int(data["weight"])
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError("Malformed delegation.") from e

        return cls(warrant_point, s, weight)


def warrant_challenge(warrant_point: Point, weight: int) -> Point:
    """
    Compute the challenge point (w * x(P)) * P shared by the identity and
    signature checks.

    Raises:
    ValueError: If the warrant point is the point at infinity.
    """
    if warrant_point.is_zero():
        raise ValueError("Warrant point must not be the point at infinity.")

    return (weight * warrant_point.x) * warrant_point


def issue_delegation(private_key: int, weight: int) -> Delegation:
    """
    Issue a delegation for the original signer's private key with the given
    permission weight.

    Parameters:
    private_key (int): The original signer's private key d_A.
    weight (int): The permission weight w. No policy is applied to it.

    Returns:
    Delegation: The warrant point, the bound scalar s, and the weight.

    Raises:
    ValueError: If private_key or weight is not an integer.
    RandomnessFailure: If the entropy source cannot supply the ephemeral scalar.
    """
    if not all(isinstance(arg, int) for arg in (private_key, weight)):
        raise ValueError("Private key and weight must be integers.")

    # k ⭠ [1, Q - 1]
    nonce = random_scalar()
    # P = k * G
    warrant_point = nonce * G
    # s = d_A + k * w * x(P)
    s = (private_key + nonce * weight * warrant_point.x) % Q

    logger.debug("Issued delegation with weight %d", weight)
    return Delegation(warrant_point, s, weight)


def check_identity(delegation: Delegation, public_key: Point) -> bool:
    """
    Verify that a delegation was issued by the holder of public_key.

    Parameters:
    delegation (Delegation): The delegation to check.
    public_key (Point): The original signer's public key Q_A.

    Returns:
    bool: True if s * G == Q_A + (w * x(P)) * P, False otherwise.
    """
    if delegation.warrant_point.is_zero():
        return False

    left = delegation.s * G
    right = public_key + warrant_challenge(
        delegation.warrant_point, delegation.weight
    )

    valid = left == right
    logger.debug("Identity check %s", "passed" if valid else "failed")
    return valid
