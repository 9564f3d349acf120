"""Base service class for domain services."""

import logfire


class Service:
    """Base class for domain services.

    Subclasses set ``span_prefix``; every public operation runs inside a
    ``<span_prefix>.<operation>`` logfire span.
    """

    span_prefix: str = "service"

    def _span(self, operation: str, **attributes):
        return logfire.span(f"{self.span_prefix}.{operation}", **attributes)
