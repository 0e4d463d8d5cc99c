"""
scalar multiplication on a short Weierstrass curve over a prime field,
affine coordinates and recursive double-and-add
"""

from ecmultiply.errors import EcError, NoInverseError, UndefinedOperationError, InvalidScalarError
from ecmultiply.curve import Curve, mod_inv, xgcd, toy_curve, toy_param, toy_G
from ecmultiply.point import Infinity, INF, EcPoint, ec_add, ec_double
from ecmultiply.multiply import ec_multiply
from ecmultiply.presentation import point_to_str, log_point, str_verbose
from ecmultiply.config import Config, default_config, add_curve_arguments
from ecmultiply.demo import run, multiply, double, add

__version__ = "0.1"
