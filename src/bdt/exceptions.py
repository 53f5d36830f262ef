class BDTException(Exception):
    """Library-specific exceptions in bdt."""


class InvalidInputError(BDTException):
    """Raised when features or labels have an invalid shape."""

    def __init__(self, message: str):
        super().__init__(message)


class EmptyInputError(InvalidInputError):
    """Raised when a split or training is requested on empty input."""


class LengthMismatchError(InvalidInputError):
    """Raised when features and labels disagree on the number of samples."""


class InvalidConfigurationError(BDTException):
    """Raised when a training parameter is out of range or unknown."""

    def __init__(self, message: str):
        super().__init__(message)


class InvalidTestSetError(BDTException):
    """Raised when the test set provided is invalid."""

    def __init__(self, message: str):
        super().__init__(message)
