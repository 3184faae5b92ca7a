"""Exception hierarchy for swagnorm.

The normalization engine itself never raises: inconsistent documents are
repaired or pruned as they are walked. Errors are only raised at the I/O
edge, when a document or configuration file cannot be read.

Subclass hierarchy::

    SwagnormError
    +-- SpecParseError
    +-- ConfigError
"""


class SwagnormError(Exception):
    """Base exception for all swagnorm errors.

    Args:
        message: Human-readable error description.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SpecParseError(SwagnormError):
    """Raised when a Swagger document cannot be read or parsed into a mapping."""


class ConfigError(SwagnormError):
    """Raised for configuration problems (unreadable file, invalid JSON/YAML, failed validation)."""
