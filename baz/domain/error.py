"""Domain layer errors.

Everything the domain, application and persistence layers raise on purpose
derives from DomainError; routes map each subclass to one status code.
"""


class DomainError(Exception):
    pass


class ValidationError(DomainError):
    """Input that can never succeed, whatever the stored state."""

    pass


class NotFoundError(DomainError):
    """No stored record matches the identifier."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class PersistenceError(DomainError):
    """The store failed; the transaction was rolled back.

    The driver exception is chained as ``__cause__``.
    """

    def __init__(self, operation: str, resource: str):
        self.operation = operation
        self.resource = resource
        super().__init__(f"Failed to {operation} {resource}")
