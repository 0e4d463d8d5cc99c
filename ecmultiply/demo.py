#!/usr/bin/env python3

"""
print multiples of a base point on a small curve
$ ecmultiply 1 2 4 8 16 17
negative scalars go after --
$ ecmultiply -- -1
double or add points directly
$ ecdouble -x 1 -y 8
$ ecadd -x 1 -y 8 -X 22 -Y 9
"""

# packages
from pytictoc import TicToc
from argparse import ArgumentParser

from ecmultiply.config import Config, add_curve_arguments
from ecmultiply.errors import EcError
from ecmultiply.multiply import ec_multiply
from ecmultiply.point import EcPoint, ec_add, ec_double
from ecmultiply.presentation import log_point, point_to_str, str_verbose


def run(config, group_law=False, verbose=False):
    """print d * base for every configured scalar, return the computed points

    a scalar whose multiple is undefined maps to None
    """
    if verbose:
        print(config)
    results = {}
    t = TicToc()
    for d in config.scalars:
        t.tic()
        try:
            point = config.base * d if group_law else ec_multiply(config.base, d)
        except EcError as e:
            print(str(d) + "P undefined: " + e.message)
            results[d] = None
            continue
        elapsed = t.tocvalue()
        results[d] = point
        if verbose:
            print(str_verbose(point, d) + "\ncomputed in:\n" + "{:.6f}".format(elapsed) + " s")
        else:
            log_point(point, d)
    return results


def multiply(argv=None):
    parser = ArgumentParser(description="Multiply the base point by each scalar")
    parser.add_argument("scalars", type=int, nargs="*", help="scalars, default 1 2 4 8 16 17; put -- before negative scalars")
    add_curve_arguments(parser)
    parser.add_argument("-g", "--group_law", help="use the complete group law, equal x coordinates allowed",
                        action="store_true")
    parser.add_argument("-v", "--verbose", help="print more output", action="store_true")
    args = parser.parse_args(argv)
    return run(Config.from_args(args), args.group_law, args.verbose)


def double(argv=None):
    parser = ArgumentParser(description="Double the base point")
    add_curve_arguments(parser)
    parser.add_argument("-v", "--verbose", help="print more output", action="store_true")
    args = parser.parse_args(argv)
    config = Config.from_args(args)
    try:
        point = ec_double(config.base)
    except EcError as e:
        print("2P undefined: " + e.message)
        return None
    print(str_verbose(point, 2) if args.verbose else point_to_str(point, 2))
    return point


def add(argv=None):
    parser = ArgumentParser(description="Add a second point to the base point")
    add_curve_arguments(parser)
    parser.add_argument("-X", type=int, required=True, help="second point x in [0..prime)")
    parser.add_argument("-Y", type=int, required=True, help="second point y in [0..prime)")
    args = parser.parse_args(argv)
    config = Config.from_args(args)
    other = EcPoint(args.X, args.Y, config.curve)
    if not other.is_on_curve():
        raise ValueError("point " + str(other) + " is not on the curve " + str(config.curve))
    try:
        point = ec_add(config.base, other)
    except EcError as e:
        print("P + Q undefined: " + e.message)
        return None
    print("P + Q " + str(point))
    return point
