"""
human readable rendering of points, one line per multiple: "iP (x,y)"
"""

from base58 import b58encode_check


def point_to_str(point, i):
    return str(i) + "P " + str(point)


def log_point(point, i):
    print(point_to_str(point, i))


def str_verbose(point, i):
    if point.inf:
        return "\n" + point_to_str(point, i)
    encoded = point.to_bytes(compressed=True)
    return \
        "\n" + point_to_str(point, i) + \
        "\npoint in hex:\n" + "(" + hex(point.x) + "," + hex(point.y) + ")" + \
        "\ncompressed point in hex:\n" + encoded.hex() + \
        "\ncompressed point in base58check:\n" + b58encode_check(encoded).decode("ascii")
