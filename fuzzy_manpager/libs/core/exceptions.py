"""
Custom Exceptions

Defines custom exception classes for the Fuzzy Manpager tool.
"""

from .constants import ErrorMessages


class FuzzyManpagerError(Exception):
    """Base exception class for Fuzzy Manpager errors"""
    pass


class ConfigurationError(FuzzyManpagerError):
    """Raised when configuration is invalid or missing"""
    pass


class MissingDependencyError(FuzzyManpagerError):
    """Raised when a required external program is not installed"""

    def __init__(self, missing: list):
        self.missing = list(missing)
        super().__init__(", ".join(self.missing))


class UsageError(FuzzyManpagerError):
    """Raised when the command line cannot be parsed"""
    pass


class UnknownOptionError(UsageError):
    """Raised when the command line contains an unrecognized flag"""

    def __init__(self, option: str):
        self.option = option
        super().__init__(str(ErrorMessages.UsageError.UNKNOWN_OPTION).format(option=option))


class CollaboratorError(FuzzyManpagerError):
    """Raised when an external program cannot be started"""
    pass
