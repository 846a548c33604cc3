"""Typed exceptions for request validation and output formats."""


class StaffgenError(ValueError):
    """Base class for errors raised by the package."""


class ValidationError(StaffgenError):
    """Raised when a generation request has an invalid count or age range."""


class OutputFormatError(StaffgenError):
    """Raised when no writer is available for an output file format."""
