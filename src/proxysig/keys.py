"""
Key generation helpers for original and proxy signers. Private keys are
scalars in [1, Q - 1] and public keys are the corresponding multiples of the
base point G.
"""

import secrets
from typing import Tuple
from .constants import Q
from .errors import RandomnessFailure
from .point import Point, G


def random_scalar() -> int:
    """
    Draw a scalar uniformly at random from [1, Q - 1].

    Raises:
    RandomnessFailure: If the operating system entropy source is unavailable.
    """
    try:
        return secrets.randbelow(Q - 1) + 1
    except (OSError, NotImplementedError) as e:
        raise RandomnessFailure("Secure entropy source is unavailable.") from e


def generate_private_key() -> int:
    return random_scalar()


def public_key(private_key: int) -> Point:
    """
    Compute the public point for a private key.

    Raises:
    ValueError: If the private key is not an integer or reduces to zero.
    """
    if not isinstance(private_key, int):
        raise ValueError("Private key must be an integer.")
    if private_key % Q == 0:
        raise ValueError("Private key must not be a multiple of the group order.")

    return private_key * G


def generate_keypair() -> Tuple[int, Point]:
    """Generate a fresh (private key, public key) pair."""
    private_key = generate_private_key()
    return private_key, public_key(private_key)
