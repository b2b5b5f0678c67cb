"""
This code is currently a work in progress. It's not secure nor stable. It does
not run in constant time and must not be used to protect real keys.

This package implements a warrant-based proxy signature scheme over the NIST
P-256 elliptic curve. An original signer delegates signing authority, scoped
by an integer permission weight, to a proxy signer, who then signs messages
that anyone can verify against both signers' public keys, the warrant point,
and the weight.

Modules:
- point: Defines the Point class for handling points on an elliptic curve.
- constants: Holds the P-256 domain parameters P, A, B, Q, and G.
- keys: Key pair generation for original and proxy signers.
- delegation: Delegation issuance and the original signer identity check.
- signer: Proxy signing key derivation and message signing.
- verifier: Proxy signature verification.
- errors: Exceptions raised by the scheme.
"""

from .point import Point, G
from .constants import P, Q
from .errors import RandomnessFailure
from .keys import generate_keypair, generate_private_key, public_key
from .delegation import Delegation, issue_delegation, check_identity
from .signer import derive_signing_key, sign_message, message_hash
from .verifier import check_signature
