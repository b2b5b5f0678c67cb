"""
These constants define the NIST P-256 elliptic curve (also known as secp256r1
or prime256v1). The curve y^2 = x^3 + A*x + B operates over a finite field of
prime order P, with a base point G of order Q, specified by its coordinates
G_x and G_y.
"""

# NIST P-256 constants for elliptic curve cryptography

# The prime modulus of the field
P: int = 2**256 - 2**224 + 2**192 + 2**96 - 1

# The curve coefficients
A: int = P - 3
B: int = 0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B

# The order of the curve
Q: int = 0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551

# X-coordinate of the generator point G
G_x: int = 0x6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296

# Y-coordinate of the generator point G
G_y: int = 0x4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5
