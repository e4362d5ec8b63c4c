# core/errors.py


class RaytracerError(Exception):
    """Base class for errors raised by the path tracer."""


class ConstructionError(RaytracerError, ValueError):
    """
    Raised when a structure cannot be built from its inputs: an empty
    primitive list for the BVH, image blocks whose rows disagree with
    their declared bounds, or invalid render settings.
    """


class RenderError(RaytracerError):
    """Raised when a render worker fails; no partial image is returned."""
