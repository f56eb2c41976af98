"""Domain errors raised by the matching engine and services."""


class StaffingError(Exception):
    """Base class for staffing service errors."""


class NotFoundError(StaffingError):
    """Unknown employee, task or skill identity."""

    def __init__(self, kind: str, identity: str):
        self.kind = kind
        self.identity = identity
        super().__init__(f"{kind} {identity} not found")


class InvalidInputError(StaffingError):
    """Input violates the data contract."""


class ExtractionFailure(StaffingError):
    """Text generator returned data that could not be parsed."""


class CollaboratorFailure(StaffingError):
    """Text generator call failed or timed out."""
