"""
Console exceptions
"""


class ConsoleError(Exception):
    """Base exception for the console"""
    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ApiError(ConsoleError):
    """The remote API answered with an error (or could not be reached)"""
    def __init__(self, message: str, status: int = 0, details: dict = None):
        self.status = status
        super().__init__(message, details)


class BranchConfigurationError(ConsoleError):
    """Branch configuration is missing or unusable"""
    pass


class InvalidSelectionError(ConsoleError):
    """An order line cannot be built from the chosen item"""
    pass


class RecipeValidationError(ConsoleError):
    """Recipe payload breaks an association or quantity rule"""
    pass
