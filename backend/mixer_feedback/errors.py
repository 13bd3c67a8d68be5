"""
Feedback-specific error types.

All errors inherit from FeedbackError for easy catching.

Only definition-time and construction-time problems are raised. Runtime
problems (missing snapshot sub-state, malformed option values) never raise:
predicates degrade to False and learn reports UNSUPPORTED.
"""


class FeedbackError(Exception):
    """Base exception for all feedback registry failures."""
    pass


class CapabilityModelError(FeedbackError):
    """
    Raised when the registry factory receives a malformed capability model.

    This is fatal. A partially valid registry is never built.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Malformed capability model: {reason}")


class PredicateNotFoundError(FeedbackError, KeyError):
    """Raised when a predicate id is not present in a registry."""

    def __init__(self, predicate_id: str):
        self.predicate_id = predicate_id
        super().__init__(f"Predicate not found: {predicate_id}")

    def __str__(self) -> str:
        return self.args[0]


class DuplicatePredicateError(FeedbackError):
    """Raised when two subsystem builders emit the same predicate id."""

    def __init__(self, predicate_id: str):
        self.predicate_id = predicate_id
        super().__init__(f"Duplicate predicate id: {predicate_id}")


class OptionSchemaError(FeedbackError):
    """Raised when an option schema is declared inconsistently."""

    def __init__(self, option_id: str, reason: str):
        self.option_id = option_id
        self.reason = reason
        super().__init__(f"Invalid option '{option_id}': {reason}")
