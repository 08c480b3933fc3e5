"""
Capability errors — classified failures raised inside the dispatch core

None of these ever reach the channel as-is: the Dispatcher turns them into
Text blocks. Each carries a human-readable message and a coarse cause.
"""

from typing import Sequence

UNKNOWN_CAPABILITY = "unknown_capability"
INVALID_ARGUMENTS = "invalid_arguments"
EXECUTION_FAILED = "execution_failed"

CAUSE_PRECONDITION = "precondition"
CAUSE_EXTERNAL = "external"
CAUSE_INTERNAL = "internal"


class CapabilityError(Exception):
    """Base class for classified capability failures."""

    cause = CAUSE_INTERNAL

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DuplicateNameError(CapabilityError):
    """A capability with the same kind and name is already registered."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"Duplicate {kind} name: {name}")


class UnknownCapabilityError(CapabilityError):
    cause = UNKNOWN_CAPABILITY

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"Unknown {kind}: {name}")


class ValidationError(CapabilityError):
    """Argument validation failure; always names the offending parameter."""

    cause = INVALID_ARGUMENTS

    def __init__(self, parameter: str, message: str):
        self.parameter = parameter
        super().__init__(message)


class MissingParameterError(ValidationError):
    def __init__(self, parameter: str):
        super().__init__(parameter, f"Missing required parameter '{parameter}'")


class TypeMismatchError(ValidationError):
    def __init__(self, parameter: str, expected: str, value):
        self.expected = expected
        super().__init__(
            parameter,
            f"Parameter '{parameter}' must be a {expected}, got {type(value).__name__}",
        )


class InvalidEnumValueError(ValidationError):
    def __init__(self, parameter: str, value, accepted: Sequence[str]):
        self.value = value
        self.accepted = tuple(accepted)
        super().__init__(
            parameter,
            f"Invalid value {value!r} for parameter '{parameter}'. "
            f"Expected one of: {', '.join(self.accepted)}",
        )


class PreconditionError(CapabilityError):
    """A foreseeable misconfiguration, reported to the user as guidance."""

    cause = CAUSE_PRECONDITION


class ExternalError(CapabilityError):
    """Network, authentication or provider fault during an external call."""

    cause = CAUSE_EXTERNAL

    def __init__(self, message: str, status_code=None):
        self.status_code = status_code
        super().__init__(message)


class ExecutionError(CapabilityError):
    """A handler fault caught at the Dispatcher boundary."""

    def __init__(self, capability: str, original: BaseException):
        self.capability = capability
        self.original = original
        self.cause = getattr(original, "cause", CAUSE_INTERNAL)
        detail = getattr(original, "message", None) or str(original) or type(original).__name__
        super().__init__(f"{capability} failed: {detail}")
