#!/usr/bin/env python3

"""
short Weierstrass curve over a prime field
elliptic curve y^2 = x^3 + a * x + b (mod prime)
"""

from ecmultiply.errors import NoInverseError

# parameters
ec_prime = 29
ec_a = 2
ec_b = 3
ec_gx = 8
ec_gy = 3
toy_G = (ec_gx, ec_gy)
toy_param = ec_prime, ec_a, ec_b


def xgcd(b, n):
    """return (g, x, y) such that b * x + n * y = g = gcd(b, n)"""
    x0, x1, y0, y1 = 1, 0, 0, 1
    while n != 0:
        q, b, n = b // n, n, b % n
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return b, x0, y0


def mod_inv(x, p):
    if not isinstance(x, int) or not isinstance(p, int):
        raise TypeError("mod_inv arguments must be int")
    if p < 2:
        raise ValueError("modulus must be greater than 1")
    g, inv, _ = xgcd(x % p, p)
    if g != 1:
        raise NoInverseError(x, p)
    return inv % p


class Curve(object):

    # prime is assumed, not checked

    def __init__(self, param):
        prime, a, b = param
        for v in (prime, a, b):
            if not isinstance(v, int):
                raise TypeError("curve parameters must be int")
        if prime < 2:
            raise ValueError("prime must be greater than 1")
        self.prime = prime
        self.a = a % prime
        self.b = b % prime

    def f(self, x):
        """x^3 + a * x + b (mod prime)"""
        return (x ** 3 + self.a * x + self.b) % self.prime

    def is_on_curve(self, point):
        if point.inf:
            return True
        return point.y ** 2 % self.prime == self.f(point.x)

    def __eq__(self, other):
        if not isinstance(other, Curve):
            return False
        return self.prime == other.prime and \
               self.a == other.a and \
               self.b == other.b

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.prime, self.a, self.b))

    def __str__(self):
        return "y^2 = x^3 + " + str(self.a) + " * x + " + str(self.b) + " mod (" + str(self.prime) + ")"

    def __repr__(self):
        return "Curve(" + str(self.prime) + ", " + str(self.a) + ", " + str(self.b) + ")"


toy_curve = Curve(toy_param)
