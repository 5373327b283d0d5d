#Expose the high-level pipeline pieces:
#PairingSystem orchestrator (the "one call" entry point)
#PairingSettings tuning knobs
#Exceptions callers are expected to handle

import logging

from .errors import ConfigurationError, MalformedWeightsError, NoEligibleProvidersError, PairingError
from .policy import PairingSettings, default_pairing_settings, lenient_pairing_settings
from .system import PairingSystem
from .weights import validate_weights

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "PairingSystem",
    "PairingSettings",
    "default_pairing_settings",
    "lenient_pairing_settings",
    "validate_weights",
    "PairingError",
    "NoEligibleProvidersError",
    "MalformedWeightsError",
    "ConfigurationError",
]
