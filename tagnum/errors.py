from tagnum.utils.logging import Error


class UnsupportedOperationError(TypeError):
    """Raised when an operation is requested that the wrapped type(s) cannot perform.

    The error is logged to the package logger as it is raised.

    :param message: Description of the rejected operation.
    :type message: str
    """

    def __init__(self, message: str) -> None:
        Error(message)
        super().__init__(message)
