#Purpose: The provider registry "adapter/client".
#Sole responsibility: talk to a provider registry over HTTP and return Provider models.
#Encapsulates registry-specific details:
#URL construction (/providers)
#timeouts/error handling
#parsing response JSON into our internal shape
#It should not contain filtering or scoring rules.

from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

import requests
from dotenv import load_dotenv

from .loader import ProviderDataError, provider_from_record
from .models import Provider

# Read the registry base URL from environment
# Example in .env:
# PROVIDER_REGISTRY_URL=http://localhost:8080
load_dotenv()
REGISTRY_URL = os.getenv("PROVIDER_REGISTRY_URL")


class RegistryError(Exception):
    """Custom exception for provider registry client errors."""
    pass


class ProviderRegistryClient:
    """
    Provider registry adapter.

    Sole responsibility:
    - GET the provider list from the registry
    - validate the response
    - return normalized Provider models
    """
    def __init__(self, base_url: Optional[str] = None, timeout: int = 5):
        self.base_url = (base_url or REGISTRY_URL or "").rstrip("/")
        self.timeout = timeout # seconds to wait for the registry before giving up

        if not self.base_url:
            raise ValueError("Provider registry URL not set. Pass base_url or set PROVIDER_REGISTRY_URL in the .env file.")

    def fetch_providers(self, location: Optional[str] = None) -> List[Provider]:
        """
        Calls GET {base_url}/providers and returns the provider pool.

        The registry answers with either a JSON list of provider objects or
        {"providers": [...]}. `location` is passed through as a query hint;
        the pairing filters still decide eligibility.
        """
        params: Dict[str, Any] = {}
        if location:
            params["location"] = location

        try:
            response = requests.get(f"{self.base_url}/providers", params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise RegistryError(f"Registry request failed: {e}") from e

        if not response.ok:
            raise RegistryError(f"Registry error: HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise RegistryError("Registry returned a non-JSON body") from e

        records = data.get("providers") if isinstance(data, dict) else data
        if not isinstance(records, list):
            raise RegistryError("Registry payload has no provider list")

        try:
            return [provider_from_record(record) for record in records]
        except ProviderDataError as e:
            raise RegistryError(f"Registry returned a malformed provider: {e}") from e
