"""
Errors raised by the order intake chain.

The CRUD layer raises fastapi.HTTPException directly; these are for the
multi-step intake flows, which decide themselves which failures are fatal.
"""


class IntakeError(Exception):
    """Base class for order intake failures"""

    def __init__(self, message: str, step: str | None = None):
        super().__init__(message)
        self.message = message
        self.step = step


class OrderCreationError(IntakeError):
    """The order row itself could not be persisted"""


class CustomerResolutionError(IntakeError):
    """Customer lookup or creation failed where the flow requires a customer"""
