"""
Error types raised by curvekit.

Two families matter to callers:
    - NotInvertibleError: an undefined operation (inverting or dividing by
      zero). Exceptional but recoverable.
    - PointNotOnCurveError / GroupLawError: an invariant was violated. These
      signal a bug or bad curve parameters and should not be caught for flow
      control.
"""


class CurveKitError(Exception):
    pass


class NotInvertibleError(CurveKitError, ValueError):
    """Raised when inverting (or dividing by) the additive identity."""


class PointNotOnCurveError(CurveKitError, ValueError):
    """Raised when coordinates do not satisfy y^2 = x^3 + A*x + B."""


class GroupLawError(CurveKitError, ArithmeticError):
    """Raised when the group law divides by zero, e.g. doubling (x, 0)."""


class FieldMismatchError(CurveKitError, TypeError):
    """Raised when operands belong to different field descriptors."""
