import ecmultiply


def cmd_multiply():
    ecmultiply.multiply()


def cmd_double():
    ecmultiply.double()


def cmd_add():
    ecmultiply.add()
