import unittest

from ecmultiply.curve import Curve, toy_curve
from ecmultiply.errors import InvalidScalarError, UndefinedOperationError
from ecmultiply.multiply import ec_multiply
from ecmultiply.point import EcPoint, INF, ec_add, ec_double


def pt(x, y):
    return EcPoint(x, y, toy_curve)


P = pt(8, 3)   # order 3
Q = pt(1, 8)   # order 36, generates the whole group

# multiples of Q pinned by hand
Q_MULTIPLES = {
    1: pt(1, 8),
    2: pt(22, 9),
    3: pt(11, 15),
    4: pt(23, 23),
    8: pt(5, 15),
    12: pt(8, 3),
    16: pt(3, 23),
    17: pt(16, 10),
    18: pt(28, 0),
}


def defined_multiple(point, d):
    try:
        return ec_multiply(point, d)
    except UndefinedOperationError:
        return None


class TestScalarMultiply(unittest.TestCase):

    def test_zero_is_infinity(self):
        self.assertIs(ec_multiply(Q, 0), INF)
        self.assertIs(ec_multiply(P, 0), INF)
        self.assertNotEqual(ec_multiply(Q, 0), EcPoint(0, 0, toy_curve))

    def test_one_is_identity(self):
        self.assertIs(ec_multiply(Q, 1), Q)
        for x, y in ((8, 3), (28, 0), (5, 14)):
            point = pt(x, y)
            self.assertIs(ec_multiply(point, 1), point)

    def test_infinity_base(self):
        self.assertIs(ec_multiply(INF, 5), INF)

    def test_pinned_multiples(self):
        for d, expected in Q_MULTIPLES.items():
            self.assertEqual(ec_multiply(Q, d), expected, str(d))

    def test_base_point_relations(self):
        self.assertEqual(ec_multiply(P, 2), ec_double(P))
        self.assertEqual(ec_multiply(P, 2), pt(8, 26))
        self.assertEqual(ec_multiply(P, 4), ec_double(ec_double(P)))
        self.assertEqual(ec_multiply(P, 4), P)
        self.assertEqual(ec_multiply(Q, 17), ec_add(ec_multiply(Q, 16), Q))

    def test_base_point_collision(self):
        # 16P == P on the toy curve, so 17P needs P + P through ec_add
        with self.assertRaises(UndefinedOperationError):
            ec_multiply(P, 17)
        with self.assertRaises(UndefinedOperationError):
            ec_add(ec_multiply(P, 16), P)
        with self.assertRaises(UndefinedOperationError):
            ec_multiply(P, 3)

    def test_order_two_collision(self):
        with self.assertRaises(UndefinedOperationError):
            ec_multiply(Q, 36)
        with self.assertRaises(UndefinedOperationError):
            ec_multiply(pt(28, 0), 2)

    def test_additive(self):
        for m in range(0, 40):
            for n in range(0, 40):
                left = defined_multiple(Q, m + n)
                mp, nq = defined_multiple(Q, m), defined_multiple(Q, n)
                if left is None or mp is None or nq is None:
                    continue
                if not mp.inf and not nq.inf and mp.x == nq.x:
                    continue
                self.assertEqual(left, ec_add(mp, nq), str((m, n)))
        self.assertEqual(ec_multiply(Q, 3), ec_add(ec_multiply(Q, 1), ec_multiply(Q, 2)))
        self.assertEqual(ec_multiply(Q, 12), ec_add(ec_multiply(Q, 4), ec_multiply(Q, 8)))
        self.assertEqual(ec_multiply(Q, 18), ec_add(ec_multiply(Q, 2), ec_multiply(Q, 16)))

    def test_matches_group_law(self):
        for d in range(0, 100):
            result = defined_multiple(Q, d)
            if result is not None:
                self.assertEqual(result, Q * d, str(d))

    def test_large_curve(self):
        # secp256k1
        prime = 0xfffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2f
        curve = Curve((prime, 0, 7))
        g = EcPoint(0x79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798,
                    0x483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8, curve)
        self.assertEqual(ec_multiply(g, 2), EcPoint(
            0xc6047f9441ed7d6d3045406e95c07cd85c778e4b8cef3ca7abac09b95c709ee5,
            0x1ae168fea63dc339a3c58419466ceaeef7f632653266d0e1236431a950cfe52a, curve))
        self.assertEqual(ec_multiply(g, 3), EcPoint(
            0xf9308a019258c31049344f85f89d5229b531c845836f99b08601f113bce036f9,
            0x388f7b0f632de8140fe337e62a37f3566500a99934c2231b6cb9fd7584b8e672, curve))
        k = 0xaa5e28d6a97a2479a65527f7290311a3624d4cc0fa1578598ee3c2613bf99522
        self.assertEqual(ec_multiply(g, k), g * k)
        self.assertTrue(ec_multiply(g, k).is_on_curve())

    def test_huge_scalar(self):
        prime = 0xfffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2f
        curve = Curve((prime, 0, 7))
        g = EcPoint(0x79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798,
                    0x483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8, curve)
        d = 2 ** 1024 + 1
        self.assertEqual(ec_multiply(g, d), g * d)

    def test_negative_scalar(self):
        with self.assertRaises(InvalidScalarError):
            ec_multiply(Q, -1)
        with self.assertRaises(ValueError):
            ec_multiply(Q, -17)

    def test_scalar_type(self):
        with self.assertRaises(TypeError):
            ec_multiply(Q, 2.0)


if __name__ == '__main__':
    unittest.main()
