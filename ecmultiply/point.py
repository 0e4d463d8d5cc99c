#!/usr/bin/env python3

"""
points in affine coordinates and the addition/doubling formulas

a point is either INF, the point @ infinity, or an EcPoint with
coordinates in [0..prime) on a shared Curve
"""

from ecmultiply.curve import mod_inv, Curve
from ecmultiply.errors import UndefinedOperationError


class Infinity(object):

    inf = True
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other):
        return isinstance(other, Infinity)

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(Infinity)

    def __add__(self, other):
        if not isinstance(other, (Infinity, EcPoint)):
            raise TypeError("Unsupported operand type for +")
        return other

    def __neg__(self):
        return self

    def __mul__(self, other):
        if not isinstance(other, int):
            raise TypeError("multiplication only with int")
        return self

    def __rmul__(self, other):
        return self.__mul__(other)

    def __str__(self):
        return "Point @ Infinity"

    def __repr__(self):
        return "INF"


INF = Infinity()


class EcPoint(object):

    inf = False

    def __init__(self, x, y, curve):
        if not isinstance(curve, Curve):
            raise TypeError("curve must be a Curve")
        if not isinstance(x, int) or not isinstance(y, int):
            raise TypeError("ec point coordinate must be int")
        if not 0 <= x < curve.prime or not 0 <= y < curve.prime:
            raise ValueError("ec point coordinate must be in [0..prime)")
        self.x = x
        self.y = y
        self.curve = curve

    def is_on_curve(self):
        return self.curve.is_on_curve(self)

    def to_bytes(self, compressed=True):
        size = (self.curve.prime.bit_length() + 7) // 8
        if compressed:
            return (b'\x02' if self.y % 2 == 0 else b'\x03') + self.x.to_bytes(size, "big")
        else:
            return b'\x04' + self.x.to_bytes(size, "big") + self.y.to_bytes(size, "big")

    def __eq__(self, other):
        if not isinstance(other, EcPoint):
            return False
        return self.x == other.x and self.y == other.y and self.curve == other.curve

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.x, self.y, self.curve))

    def __neg__(self):
        return EcPoint(self.x, -self.y % self.curve.prime, self.curve)

    def __add__(self, other):
        """complete group law: identity, inverses and doubling included"""
        if not isinstance(other, (Infinity, EcPoint)):
            raise TypeError("Unsupported operand type for +")
        if other.inf:
            return self
        if not self.curve == other.curve:
            raise ValueError("Cannot add points of different curves")
        if self.x == other.x and self.y != other.y:
            return INF
        if self == other:
            if self.y == 0:
                return INF
            return ec_double(self)
        return ec_add(self, other)

    def __sub__(self, other):
        return self + (-other)

    def __mul__(self, other):
        if not isinstance(other, int):
            raise TypeError("multiplication only with int")
        scalar = other
        addend = self
        if scalar < 0:
            scalar = -scalar
            addend = -self
        result = INF
        while scalar > 0:
            if scalar % 2 == 1:
                result += addend
            addend += addend
            scalar //= 2
        return result

    def __rmul__(self, other):
        return self.__mul__(other)

    def __str__(self):
        return "(" + str(self.x) + "," + str(self.y) + ")"

    def __repr__(self):
        return "EcPoint(" + str(self.x) + ", " + str(self.y) + ", " + repr(self.curve) + ")"


def _chord(p, q, lam):
    prime = p.curve.prime
    x = (lam * lam - p.x - q.x) % prime
    y = (lam * (p.x - x) - p.y) % prime
    return EcPoint(x, y, p.curve)


def ec_add(p, q):
    """add two points with distinct x coordinates"""
    if not isinstance(p, (Infinity, EcPoint)) or not isinstance(q, (Infinity, EcPoint)):
        raise TypeError("Unsupported operand type for ec_add")
    if p.inf:
        return q
    if q.inf:
        return p
    if not p.curve == q.curve:
        raise ValueError("Cannot add points of different curves")
    if p.x == q.x:
        raise UndefinedOperationError("cannot add points with the same x coordinate " + str(p.x) +
                                      ", the result is a doubling or the point @ infinity")
    prime = p.curve.prime
    lam = ((q.y - p.y) * mod_inv(q.x - p.x, prime)) % prime
    return _chord(p, q, lam)


def ec_double(p):
    if not isinstance(p, (Infinity, EcPoint)):
        raise TypeError("Unsupported operand type for ec_double")
    if p.inf:
        return p
    if p.y == 0:
        raise UndefinedOperationError("point " + str(p) + " has order 2, its double is the point @ infinity")
    prime = p.curve.prime
    lam = ((3 * p.x * p.x + p.curve.a) * mod_inv(2 * p.y, prime)) % prime
    return _chord(p, p, lam)
