"""Custom exceptions used across outlinediff."""

__all__ = ["OutlineDiffError", "ImageDecodeError", "ImageEncodeError"]


class OutlineDiffError(Exception):
    """Base class for outlinediff errors."""

    pass


class ImageDecodeError(OutlineDiffError):
    """Raised when an image file cannot be read into an RGB buffer."""

    pass


class ImageEncodeError(OutlineDiffError):
    """Raised when an RGB buffer cannot be written to disk."""

    pass
