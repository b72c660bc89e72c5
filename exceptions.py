"""Errors raised by the workspace pipeline."""


class WorkspaceError(Exception):
    """Base class for workspace computation errors."""


class InvalidInputError(WorkspaceError, ValueError):
    """DH table or parameter ranges are malformed or do not match."""


class NotTwoDimensionalError(WorkspaceError, ValueError):
    """No position axis stays near zero, so the workspace is not planar."""

    def __init__(self, threshold, axis, magnitude):
        self.threshold = threshold
        self.axis = axis
        self.magnitude = magnitude
        super().__init__(
            f"With a 2D workspace, it is expected that one of the X,Y,Z positions "
            f"is always near 0 (<= {threshold:g}). Instead the smallest candidate "
            f"{axis} has a max position magnitude of {magnitude:g}"
        )
