from ecmultiply.errors import InvalidScalarError
from ecmultiply.point import INF, ec_add, ec_double


def ec_multiply(p, d):
    """d * p by double-and-add

    odd d adds p to (d - 1) * p, even d halves d after doubling p. The
    pending addends are kept on a stack instead of the call stack, so the
    operations run in the same order as the recursive form for any size of d.
    On small curves an intermediate sum can land on a point with the same x
    as the addend: ec_add raises UndefinedOperationError there.
    """
    if not isinstance(d, int):
        raise TypeError("scalar must be an int")
    if d < 0:
        raise InvalidScalarError("scalar must be non-negative, got " + str(d))
    if d == 0:
        return INF
    addends = []
    while d > 1:
        if d % 2 == 1:  # addition when d is odd
            addends.append(p)
            d -= 1
        else:           # doubling when d is even
            p = ec_double(p)
            d //= 2
    result = p
    while addends:
        result = ec_add(addends.pop(), result)
    return result
