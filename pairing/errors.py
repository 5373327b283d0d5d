"""
Exceptions raised by the pairing package.
"""


class PairingError(Exception):
    """Base class for pairing failures surfaced to callers."""
    pass


class NoEligibleProvidersError(PairingError):
    """Raised in strict mode when no provider passes the filters."""
    pass


class MalformedWeightsError(PairingError):
    """Raised by weight validation when a policy's weights do not sum to 1.0."""
    pass


class ConfigurationError(PairingError):
    """Raised when PairingSettings hold an unusable value."""
    pass
