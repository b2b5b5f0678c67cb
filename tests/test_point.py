import unittest

from proxysig import Point, G, Q
from proxysig.constants import P


class Tests(unittest.TestCase):
    def test_generator_on_curve(self):
        self.assertTrue(G.is_on_curve())
        self.assertFalse(Point(G.x, G.y + 1).is_on_curve())

    def test_double(self):
        expected = Point(
            0x7CF27B188D034F7E8A52380304B51AC3C08969E277F21B35A60B48FC47669978,
            0x07775510DB8ED040293D9AC69F7430DBBA7DADE63CE982299E04B79D227873D1,
        )
        self.assertEqual(G + G, expected)
        self.assertEqual(2 * G, expected)

    def test_addition(self):
        self.assertEqual(G + G + G, 3 * G)
        self.assertEqual((5 * G) + (7 * G), 12 * G)
        self.assertEqual((12 * G) - (7 * G), 5 * G)
        self.assertTrue((3 * G).is_on_curve())

    def test_identity(self):
        zero = Point()
        self.assertTrue(zero.is_zero())
        self.assertEqual(G + zero, G)
        self.assertEqual(zero + G, G)
        self.assertEqual(G - G, zero)
        self.assertEqual(0 * G, zero)
        self.assertEqual(-zero, zero)

    def test_scalar_reduced_modulo_order(self):
        self.assertEqual((Q - 1) * G, -G)
        self.assertEqual((Q + 2) * G, 2 * G)
        self.assertEqual(-1 * G, -G)
        with self.assertRaises(ValueError):
            G.__rmul__(1.0)

    def test_add_requires_point(self):
        with self.assertRaises(ValueError):
            G + 1

    def test_sec_serialize(self):
        compressed = G.sec_serialize()
        uncompressed = G.sec_serialize(compressed=False)

        self.assertEqual(len(compressed), 33)
        self.assertEqual(len(uncompressed), 65)
        self.assertEqual(compressed[0], 3)
        self.assertEqual(uncompressed[0], 4)
        with self.assertRaises(ValueError):
            Point().sec_serialize()

    def test_sec_deserialize(self):
        for point in (G, -G, 2 * G, 3 * G):
            self.assertEqual(Point.sec_deserialize(point.sec_serialize().hex()), point)
            self.assertEqual(
                Point.sec_deserialize(point.sec_serialize(compressed=False).hex()),
                point,
            )

    def test_sec_deserialize_invalid(self):
        with self.assertRaises(ValueError):
            Point.sec_deserialize("zz")
        with self.assertRaises(ValueError):
            Point.sec_deserialize("05" + "00" * 32)
        with self.assertRaises(ValueError):
            Point.sec_deserialize("04" + G.x.to_bytes(32, "big").hex() + "00" * 32)
        with self.assertRaises(ValueError):
            Point.sec_deserialize("02" + P.to_bytes(32, "big").hex())


if __name__ == "__main__":
    unittest.main()
