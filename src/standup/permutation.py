"""Client for the random.org JSON-RPC service.

The service is asked for ``n`` unique integers in ``[0, n-1]``, which is a
permutation of that range. Every response is checked before it is handed
back; nothing is retried or corrected here.
"""

from __future__ import annotations

import itertools
import time
from typing import Any, List, Protocol

import httpx

from .core.logging import logger
from .exceptions import ConfigError, ProtocolError, TransportError, ValidationError

DEFAULT_API_URI = "https://api.random.org/json-rpc/2/invoke"
MAX_INTEGERS = 10_000


class PermutationSource(Protocol):
    def generate_permutation(self, n: int) -> List[int]:
        """Return a permutation of ``range(n)``."""


class RandomOrgClient:
    def __init__(self, api_key: str, api_uri: str = DEFAULT_API_URI, *, timeout: float = 10.0):
        if not api_key or not api_key.strip():
            raise ConfigError("The random.org API key is not configured.")
        try:
            url = httpx.URL(api_uri)
        except (httpx.InvalidURL, TypeError) as exc:
            raise ConfigError(f"Invalid random.org endpoint {api_uri!r}.") from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise ConfigError(f"Invalid random.org endpoint {api_uri!r}.")

        self.api_key = api_key
        self.api_uri = str(url)
        self.timeout = timeout
        self._ids = itertools.count(1)
        self._next_request_at = 0.0
        self._client = httpx.Client(
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )

    def generate_permutation(self, n: int) -> List[int]:
        if n < 0:
            raise ValidationError("Permutation size cannot be negative.")
        if n > MAX_INTEGERS:
            raise ValidationError(f"Permutation size cannot exceed {MAX_INTEGERS}.")
        if n <= 1:
            return list(range(n))

        request_id = next(self._ids)
        payload = {
            "jsonrpc": "2.0",
            "method": "generateIntegers",
            "params": {
                "apiKey": self.api_key,
                "n": n,
                "min": 0,
                "max": n - 1,
                "replacement": False,
                "base": 10,
            },
            "id": request_id,
        }
        result = self._call(payload, request_id)
        return self._validate_permutation(result, n)

    def _call(self, payload: dict[str, Any], request_id: int) -> dict[str, Any]:
        self._wait_for_advisory_delay()
        logger.debug("Requesting {} integers from {}", payload["params"]["n"], self.api_uri)
        try:
            response = self._client.post(self.api_uri, json=payload)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise TransportError(f"Request to {self.api_uri} timed out.") from exc
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                f"random.org answered with HTTP {exc.response.status_code}."
            ) from exc
        except httpx.TransportError as exc:
            raise TransportError(f"Could not reach {self.api_uri}: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise ProtocolError("random.org returned a body that is not JSON.") from exc
        if not isinstance(data, dict):
            raise ProtocolError("random.org returned a JSON value that is not an object.")

        error = data.get("error")
        if error is not None:
            if isinstance(error, dict):
                code = error.get("code")
                message = error.get("message", "unknown error")
            else:
                code, message = None, str(error)
            raise ProtocolError(f"random.org error {code}: {message}", code=code)

        if data.get("id") != request_id:
            raise ProtocolError(
                f"Response id {data.get('id')!r} does not match request id {request_id}."
            )
        result = data.get("result")
        if not isinstance(result, dict):
            raise ProtocolError("random.org response has no result object.")

        self._record_usage(result)
        return result

    def _record_usage(self, result: dict[str, Any]) -> None:
        logger.debug(
            "random.org usage: requestsLeft={} bitsLeft={}",
            result.get("requestsLeft"),
            result.get("bitsLeft"),
        )
        delay = result.get("advisoryDelay")
        if isinstance(delay, (int, float)) and not isinstance(delay, bool) and delay > 0:
            self._next_request_at = time.monotonic() + delay / 1000.0

    def _wait_for_advisory_delay(self) -> None:
        remaining = self._next_request_at - time.monotonic()
        if remaining > 0:
            logger.debug("Honouring advisory delay of {:.3f}s", remaining)
            time.sleep(remaining)

    @staticmethod
    def _validate_permutation(result: dict[str, Any], n: int) -> List[int]:
        random = result.get("random")
        values = random.get("data") if isinstance(random, dict) else None
        if not isinstance(values, list):
            raise ProtocolError("random.org response has no random data.")
        if any(isinstance(value, bool) or not isinstance(value, int) for value in values):
            raise ProtocolError("random.org returned non-integer data.")
        if len(values) != n:
            raise ProtocolError(f"Expected {n} integers, received {len(values)}.")
        if sorted(values) != list(range(n)):
            raise ProtocolError(f"Received integers are not a permutation of 0..{n - 1}.")
        return list(values)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "RandomOrgClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
