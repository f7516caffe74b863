"""
Error taxonomy for the guided-filter core.

All errors derive from ``ValueError`` so callers validating inputs the usual
way keep working.
"""


class GuidedFilterError(ValueError):
    """Base class for contract violations raised by gf1d."""


class ShapeMismatchError(GuidedFilterError):
    """Guide and input images do not share the same dimensions."""


class InvalidParameterError(GuidedFilterError):
    """Radius, eps or image layout outside the supported range."""


class EmptyImageError(GuidedFilterError):
    """Image with zero rows or zero columns."""
