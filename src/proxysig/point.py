"""
This module defines the Point class, which represents points on the NIST P-256
elliptic curve. It includes methods for point arithmetic such as addition,
multiplication, and negation, as well as SEC 1 serialization and
deserialization of points.

The Point class provides the group operations the proxy signature scheme is
built on: point addition, scalar multiplication, equality, and checks for the
point at infinity.
"""

from __future__ import annotations
from typing import Optional
from .constants import P, A, B, Q, G_x, G_y


class Point:
    """Class representing an elliptic curve point."""

    def __init__(self, x: Optional[int] = None, y: Optional[int] = None):
        """
        Initialize a point on an elliptic curve.

        Parameters:
        x (Optional[int], optional): The x-coordinate of the point.
            Defaults to None, representing the point at infinity.
        y (Optional[int], optional): The y-coordinate of the point.
            Defaults to None, also representing the point at infinity.

        The point at infinity serves as the identity element in elliptic curve addition.
        """

        self.x = x
        self.y = y

    @classmethod
    def sec_deserialize(cls, hex_public_key: str) -> Point:
        """
        Deserialize a SEC 1 hex-encoded public key to a Point object. Both the
        compressed (33 bytes) and uncompressed (65 bytes) forms are accepted.

        Parameters:
        hex_public_key (str): Hexadecimal string of the encoded public key.

        Returns:
        Point: An instance of Point corresponding to the deserialized public key.

        Raises:
        ValueError: If the input is not a valid hex string, does not represent
        a valid point, or has incorrect length.
        """
        try:
            hex_bytes = bytes.fromhex(hex_public_key)
        except ValueError as e:
            raise ValueError("Invalid hex input for SEC 1 public key.") from e

        if len(hex_bytes) == 65 and hex_bytes[0] == 4:
            x = int.from_bytes(hex_bytes[1:33], "big")
            y = int.from_bytes(hex_bytes[33:], "big")
        elif len(hex_bytes) == 33 and hex_bytes[0] in (2, 3):
            is_even = hex_bytes[0] == 2
            x = int.from_bytes(hex_bytes[1:], "big")
            y_squared = (pow(x, 3, P) + A * x + B) % P
            # P = 3 mod 4, so the square root is a single exponentiation
            y = pow(y_squared, (P + 1) // 4, P)
            if y * y % P != y_squared:
                raise ValueError("Unable to compute point from x-coordinate.")
            if (y % 2 == 0) != is_even:
                y = (P - y) % P
        else:
            raise ValueError(
                "Input must be 33 bytes (compressed) or 65 bytes (uncompressed) long."
            )

        point = cls(x, y)
        if not point.is_on_curve():
            raise ValueError("Decoded point is not on the curve.")
        return point

    def sec_serialize(self, compressed: bool = True) -> bytes:
        """
        Serialize the point to its SEC 1 format.

        Parameters:
        compressed (bool): Emit the 33-byte compressed form when True,
        otherwise the 65-byte uncompressed form.

        Returns:
        bytes: The SEC 1 encoding of the point.

        Raises:
        ValueError: If the point is at infinity.
        """
        if self.x is None or self.y is None:
            raise ValueError("Cannot serialize the point at infinity.")

        if not compressed:
            return b"\x04" + self.x.to_bytes(32, "big") + self.y.to_bytes(32, "big")
        prefix = b"\x02" if self.y % 2 == 0 else b"\x03"
        return prefix + self.x.to_bytes(32, "big")

    def is_zero(self) -> bool:
        """
        Check if the point is the identity element (point at infinity) in elliptic curve arithmetic.

        Returns:
        bool: True if the point is at infinity, False otherwise.
        """
        return self.x is None or self.y is None

    def is_on_curve(self) -> bool:
        """
        Check whether the point satisfies the curve equation. The point at
        infinity is considered to be on the curve.
        """
        if self.x is None or self.y is None:
            return True
        if not (0 <= self.x < P and 0 <= self.y < P):
            return False
        return (self.y * self.y - (pow(self.x, 3, P) + A * self.x + B)) % P == 0

    def __eq__(self, other: object) -> bool:
        """
        Determine if this point is equal to another point by comparing their coordinates.

        Parameters:
        other (object): The object to compare with.

        Returns:
        bool: True if both points have the same coordinates, False otherwise.
        """
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __neg__(self) -> Point:
        """
        Negate the point on the elliptic curve.

        Returns:
        Point: A new Point that is the negation of the current point. If the
        current point is at infinity, it returns the point at infinity.
        """
        if self.x is None or self.y is None:
            return self

        return self.__class__(self.x, (P - self.y) % P)

    def _dbl(self) -> Point:
        """
        Double the point on the elliptic curve. If the point is at infinity or the y-coordinate
        is zero (implying the point is of order 2), the result is the point at infinity.

        Returns:
        Point: A new Point that is the result of doubling the current point.
        """
        if self.x is None or self.y is None or self.y == 0:
            # Return the point at infinity
            return self.__class__()

        x = self.x
        y = self.y
        s = ((3 * x * x + A) * pow(2 * y, P - 2, P)) % P
        sum_x = (s * s - 2 * x) % P
        sum_y = (s * (x - sum_x) - y) % P

        return self.__class__(sum_x, sum_y)

    def __add__(self, other: Point) -> Point:
        """
        Add two points on an elliptic curve.

        Parameters:
        other (Point): Another point to add to this point.

        Returns:
        Point: The sum of the two points as a new Point object.

        Raises:
        ValueError: If other is not a Point.
        """
        if not isinstance(other, Point):
            raise ValueError("The other object must be an instance of Point")

        if self == other:
            return self._dbl()
        if self.x is None or self.y is None:
            return other
        if other.x is None or other.y is None:
            return self
        if self.x == other.x and self.y != other.y:
            return self.__class__()  # Point at infinity
        s = ((other.y - self.y) * pow(other.x - self.x, P - 2, P)) % P
        sum_x = (s * s - self.x - other.x) % P
        sum_y = (s * (self.x - sum_x) - self.y) % P

        return self.__class__(sum_x, sum_y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            raise ValueError("The other object must be an instance of Point")

        return self + -other

    def __rmul__(self, scalar: int) -> Point:
        """
        Multiply this point by an integer scalar using the double-and-add
        method, reduced modulo the curve order.

        Parameters:
        scalar (int): The scalar to multiply this point by. Negative and
        oversized scalars are accepted and reduced modulo Q.

        Returns:
        Point: The result of the scalar multiplication.

        Raises:
        ValueError: If the scalar is not an integer.
        """
        if not isinstance(scalar, int):
            raise ValueError("The scalar must be an integer")

        scalar = scalar % Q

        p = self
        r = self.__class__()
        i = 1

        while i <= scalar:
            if i & scalar:
                r = r + p
            p = p._dbl()
            i <<= 1

        return r

    def __str__(self) -> str:
        if self.is_zero():
            return "0"
        return f"X: 0x{self.x:x}\nY: 0x{self.y:x}"

    def __repr__(self) -> str:
        if self.is_zero():
            return f"{self.__class__.__name__}(x=None, y=None)"
        return f"{self.__class__.__name__}(x={self.x}, y={self.y})"


# The generator point G
G: Point = Point(G_x, G_y)
