class EcError(Exception):
    def __init__(self, message):
        super().__init__(message)
        self.message = message


class NoInverseError(EcError):
    def __init__(self, x, p):
        super().__init__("no modular inverse of " + str(x) + " mod " + str(p))
        self.x = x
        self.p = p


class UndefinedOperationError(EcError):
    pass


class InvalidScalarError(EcError, ValueError):
    pass
