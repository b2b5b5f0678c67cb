"""
Proxy signer operations: deriving the effective signing key from a
delegation and signing messages with it.

Signing introduces no nonce; the randomness of the scheme is injected once,
when the original signer issues the delegation.
"""

from hashlib import sha256
from .constants import Q
from .delegation import Delegation


def message_hash(message: bytes) -> int:
    """Return SHA-256(message) as a big-endian integer."""
    return int.from_bytes(sha256(message).digest(), "big")


def derive_signing_key(proxy_private_key: int, delegation: Delegation) -> int:
    """
    Combine the proxy signer's private key with a delegation.

    Parameters:
    proxy_private_key (int): The proxy signer's private key d_B.
    delegation (Delegation): A delegation issued by the original signer.

    Returns:
    int: The proxy signing key l = d_B + s (mod Q).
    """
    if not isinstance(proxy_private_key, int):
        raise ValueError("Proxy private key must be an integer.")

    # l = d_B + s
    return (proxy_private_key + delegation.s) % Q


def sign_message(message: bytes, signing_key: int, proxy_private_key: int) -> int:
    """
    Sign a message with the proxy signing key.

    Parameters:
    message (bytes): The message to sign.
    signing_key (int): The proxy signing key l from derive_signing_key.
    proxy_private_key (int): The proxy signer's private key d_B.

    Returns:
    int: The signature l * H(m) + d_B (mod Q).
    """
    if not isinstance(message, bytes):
        raise ValueError("Message must be bytes.")

    # H(m)
    h = message_hash(message)
    # σ = l * H(m) + d_B
    return (signing_key * h + proxy_private_key) % Q
