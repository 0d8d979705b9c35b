"""
Overpass API client

Handles communication with Overpass API including:
- Endpoint rotation after failures
- Rate limiting
- Error handling
"""

import time
import requests
from typing import Dict, Any, Optional, Sequence
from loguru import logger

from ...config import OverpassConfig, get_config
from ...exceptions import MalformedResponse, SourceUnavailable


class EndpointRotation:
    """Ranked list of interchangeable endpoints with a rotating pointer"""

    def __init__(self, endpoints: Sequence[str], start: int = 0):
        if not endpoints:
            raise ValueError("EndpointRotation requires at least one endpoint")
        self.endpoints = list(endpoints)
        self.index = start % len(self.endpoints)

    def __len__(self) -> int:
        return len(self.endpoints)

    @property
    def current(self) -> str:
        return self.endpoints[self.index]

    def advance(self) -> str:
        """Move to the next endpoint (wrapping) and return it"""
        self.index = (self.index + 1) % len(self.endpoints)
        return self.current


class OverpassAPIClient:
    """Client for interacting with Overpass API"""

    def __init__(
        self,
        config: Optional[OverpassConfig] = None,
        rotation: Optional[EndpointRotation] = None
    ):
        self.config = config or get_config().overpass
        self.rotation = rotation or EndpointRotation(self.config.endpoints)
        self.timeout = self.config.timeout_s
        self._last_request_time = 0.0
        self._min_request_interval = self.config.min_request_interval_s

    def _rate_limit(self):
        """Ensure we don't exceed rate limits"""
        elapsed = time.time() - self._last_request_time
        if elapsed < self._min_request_interval:
            time.sleep(self._min_request_interval - elapsed)
        self._last_request_time = time.time()

    def _fail(self, endpoint: str, message: str, status_code: Optional[int] = None) -> SourceUnavailable:
        next_endpoint = self.rotation.advance()
        if next_endpoint != endpoint:
            logger.warning(f"{message}; switching Overpass endpoint to {next_endpoint}")
        else:
            logger.warning(message)
        return SourceUnavailable(message, endpoint=endpoint, status_code=status_code)

    def fetch(self, query: str) -> Dict[str, Any]:
        """
        Execute Overpass API query against the active endpoint

        A failing call does not retry; it advances the rotation so the
        next call goes to the next endpoint.

        Args:
            query: Overpass QL query string

        Returns:
            JSON response from Overpass API

        Raises:
            SourceUnavailable: On HTTP error status, timeout or connection failure
            MalformedResponse: If the body is not JSON
        """
        self._rate_limit()

        endpoint = self.rotation.current
        headers = {
            "User-Agent": self.config.user_agent,
            "Content-Type": "application/x-www-form-urlencoded"
        }

        logger.debug(f"POST {endpoint} ({len(query)} bytes)")
        try:
            response = requests.post(
                endpoint,
                data={"data": query},
                headers=headers,
                timeout=self.timeout
            )
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise self._fail(endpoint, f"Overpass timeout after {self.timeout}s at {endpoint}") from e
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise self._fail(endpoint, f"Overpass HTTP error {status} at {endpoint}", status_code=status) from e
        except requests.exceptions.RequestException as e:
            raise self._fail(endpoint, f"Overpass request failed at {endpoint}: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"Overpass returned a non-JSON body from {endpoint}")
            raise MalformedResponse(f"Non-JSON response from {endpoint}") from e
