class EachyError(Exception):
    """base class for errors raised by eachy operations"""
    pass


class EmptyReductionError(EachyError, TypeError):
    """reduce_ was given an empty collection and no seed"""

    def __init__(self, message: str = "reduce of empty sequence with no seed"):
        super().__init__(message)


class InvalidIterateeError(EachyError, AttributeError):
    """invoke was asked to call a method an item does not have"""

    def __init__(self, item, method_name: str):
        self.item = item
        self.method_name = method_name
        super().__init__(f"{type(item).__name__!s} object has no method '{method_name}'")
