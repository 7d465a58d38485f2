"""
Error kinds raised by the simulation engine.

All kinds derive from ``ValueError`` so existing ``except ValueError``
handlers keep working, while tests and callers can still tell the
kinds apart.  Malformed distribution strings are *not* errors: the
parser falls back to N(0,1) with a warning instead.
"""


class SimulationError(ValueError):
    """Base class for precondition violations in the engine."""


class DomainError(SimulationError):
    """A function was evaluated outside its mathematical domain.

    Raised by ``gamma`` at non-positive integers and by the Box–Muller
    transform when a uniform draw falls outside (0, 1].
    """


class InvalidParameterError(SimulationError):
    """A simulation parameter is out of range (``n < 2``, ``variance <= 0``)."""


class EmptyInputError(SimulationError):
    """A histogram was requested over zero (finite) samples."""
