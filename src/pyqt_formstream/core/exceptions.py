"""Component model exceptions."""


class ComponentError(Exception):
    """Base class for component model errors."""


class InvalidComponentNameError(ComponentError, ValueError):
    """Raised when a component name is not a valid identifier."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid component name: {name!r}")


class DuplicateNameError(ComponentError):
    """Raised when a component name is already used by a sibling under the same owner."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"A component named {name} already exists")


class AssignError(ComponentError, TypeError):
    """Raised when one persistent object cannot be assigned to another."""

    def __init__(self, source_name: str, target_class: str):
        self.source_name = source_name
        self.target_class = target_class
        super().__init__(f"Cannot assign a {source_name} to a {target_class}")
