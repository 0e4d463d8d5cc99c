"""
startup parameters: curve, base point and the scalars to multiply by
"""

from ecmultiply.curve import Curve, ec_prime, ec_a, ec_b, toy_G
from ecmultiply.point import EcPoint

# multiples printed by the toy demo: 1P, then doublings up to 16P, then 17P
default_scalars = [1, 2, 4, 8, 16, 17]


class Config(object):

    def __init__(self, curve, base, scalars=None):
        if not isinstance(curve, Curve):
            raise TypeError("curve must be a Curve")
        if not isinstance(base, EcPoint):
            raise TypeError("base must be an EcPoint")
        if base.curve != curve:
            raise ValueError("base point must be on the configured curve")
        if not base.is_on_curve():
            raise ValueError("base point " + str(base) + " is not on the curve " + str(curve))
        self.curve = curve
        self.base = base
        self.scalars = list(default_scalars if scalars is None else scalars)

    @classmethod
    def from_args(cls, args):
        curve = Curve((args.prime, args.a, args.b))
        base = EcPoint(args.x, args.y, curve)
        return cls(curve, base, getattr(args, "scalars", None) or None)

    def __str__(self):
        return "curve: " + str(self.curve) + "\nbase point: " + str(self.base)


def default_config():
    curve = Curve((ec_prime, ec_a, ec_b))
    return Config(curve, EcPoint(toy_G[0], toy_G[1], curve))


def add_curve_arguments(parser):
    parser.add_argument("-p", "--prime", type=int, default=ec_prime, help="field prime, default " + str(ec_prime))
    parser.add_argument("-a", type=int, default=ec_a, help="curve coefficient a, default " + str(ec_a))
    parser.add_argument("-b", type=int, default=ec_b, help="curve coefficient b, default " + str(ec_b))
    parser.add_argument("-x", type=int, default=toy_G[0], help="base point x in [0..prime), default " + str(toy_G[0]))
    parser.add_argument("-y", type=int, default=toy_G[1], help="base point y in [0..prime), default " + str(toy_G[1]))
    return parser
