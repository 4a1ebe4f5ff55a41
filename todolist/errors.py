"""
TODOLIST - Errors
=================
Empty text and unknown ids are recovered inside the store as no-ops;
only unrecognized argument values are raised.
"""


class TodoListError(Exception):
    """Base class for todolist errors"""


class InvalidArgumentError(TodoListError, ValueError):
    """Unrecognized filter mode or priority value"""

    def __init__(self, kind: str, value: object, allowed: list):
        self.kind = kind
        self.value = value
        self.allowed = list(allowed)
        super().__init__(
            f"Invalid {kind}: {value!r} (expected one of: {', '.join(self.allowed)})"
        )
