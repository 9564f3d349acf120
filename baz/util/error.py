"""Errors raised while wiring the application together.

These indicate a deployment or programming mistake, never bad client input,
so routes do not translate them.
"""


class UtilError(Exception):
    pass


class ConfigurationError(UtilError):
    """Settings are present but unusable (e.g. a blank database URL)."""

    pass


class DependencyInjectionError(UtilError):
    """A swappable component has no implementation of the requested kind."""

    def __init__(self, component: str, kind: str):
        self.component = component
        self.kind = kind
        super().__init__(f"No {kind} implementation for {component}")
