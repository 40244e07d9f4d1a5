# Custom exceptions for stringlift

class StringLiftError(Exception):
    """Base exception for all application-specific errors."""
    pass

class UsageError(StringLiftError):
    """Raised when the command is invoked with the wrong arguments."""
    def __init__(self, message: str, usage: str = ""):
        self.usage = usage
        super().__init__(message)

class EmptyInputError(StringLiftError):
    """Raised when discovery resolves an input path to zero source files."""
    def __init__(self, input_path: str):
        self.input_path = input_path
        super().__init__(f"No Python files found in {input_path}")

class ConfigError(StringLiftError):
    """Raised for configuration-related problems."""
    pass
