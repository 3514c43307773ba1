"""fuzzy_match custom exceptions.

Exception Design Principles:
1. A failed lookup is not an error: "no confident match" is returned as None
2. Raise only for caller mistakes, where carrying on would hide a bug upstream
3. Split on domain of actionable information:
   - Unrecoverable except by code changes (EmptyHaystackError)
   - Recoverable by the caller choosing another name (UnknownAlgorithmError)
"""


class FuzzyMatchError(Exception):
    """Base exception for all fuzzy_match errors.

    Provides rich context and actionable suggestions beyond standard exceptions.
    All fuzzy_match custom exceptions inherit from this base class.
    """

    def __init__(
        self,
        message: str,  # the error message
        *,
        errors: list[str] | None = None,  # detailed list of errors (if available)
        suggestions: list[str] | None = None,  # remedial actions
        context: dict | None = None,  # additional detailed context
    ):
        """Initialize FuzzyMatchError.

        Args:
            message: Primary error message
            errors: List of specific error details
            suggestions: List of actionable suggestions for resolution
            context: Additional context information as key-value pairs
        """
        super().__init__(message)
        self.message = message
        self.errors = errors or []
        self.suggestions = suggestions or []
        self.context = context or {}


class EmptyHaystackError(FuzzyMatchError):
    """No candidates were given to the selector - a caller programming error.

    An empty haystack almost always means the candidate list was never
    loaded, or was filtered down to nothing upstream. Returning None here
    would be indistinguishable from "nothing was similar enough", so the
    selector raises instead. Callers should not catch this; fix the code
    that built the haystack.
    """

    pass


class UnknownAlgorithmError(FuzzyMatchError):
    """Algorithm name not present in the registry - recoverable by the caller.

    Raised by get_algorithm when a caller picks an algorithm pair by name,
    e.g. from its own settings. Suggestions list the registered names,
    closest first.
    """

    pass
