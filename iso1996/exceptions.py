"""Errors raised when an input violates a precondition of an ISO 1996 formula."""


class ISO1996Error(ValueError):
    """Base class for invalid-input errors raised by this package."""


class InvalidMeasurementTimeError(ISO1996Error):
    def __init__(self, message: str = "Measurement time must be positive"):
        super().__init__(message)


class UncertainMeasurementError(ISO1996Error):
    """
    Raised when the total level does not exceed the background level by
    more than the revision's minimum difference, so no reliable background
    correction exists.
    """

    def __init__(self, min_difference: float):
        self.min_difference = min_difference
        super().__init__(f"Measurement uncertain: ΔL ≤ {min_difference} dB")
