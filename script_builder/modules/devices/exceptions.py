"""Device and helper tool exceptions."""


class DeviceError(Exception):
    """Base class for device enumeration errors."""


class ExternalToolFailure(DeviceError):
    """Raised when a helper process fails, times out, or prints unusable output."""
