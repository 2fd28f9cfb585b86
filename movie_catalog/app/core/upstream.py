"""Blocking JSON client for calls to downstream services.

``UpstreamClient`` wraps a ``requests.Session`` bound to one base URL.
Instances are built once per process by the application factory and
handed to the components that need them, so connection pools are
shared across requests while no other state is.

Every request carries an explicit timeout.  Failures are reported as
the typed errors from :mod:`movie_catalog.app.core.errors`:

* connection problems -> :class:`UpstreamUnavailable`
* deadline exceeded -> :class:`UpstreamTimeout`
* HTTP 404 -> :class:`NotFound`
* any other non‑2xx status, or a body that is not JSON ->
  :class:`UpstreamBadResponse`

Network failures and timeouts can be retried a bounded number of
times; the other errors are final.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from movie_catalog.app.core.errors import (
    NotFound,
    UpstreamBadResponse,
    UpstreamTimeout,
    UpstreamUnavailable,
)


logger = logging.getLogger(__name__)


class UpstreamClient:
    """HTTP client for a single downstream service."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float,
        retries: int = 0,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8082``.
            timeout: Deadline in seconds applied to each attempt.
            retries: Extra attempts after a network failure or timeout.
            session: Optional requests session.  If not supplied a
                session will be created and owned by this client.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retries = retries
        self.session = session or requests.Session()

    def get_json(
        self,
        path: str,
        *,
        resource: str,
        identifier: Any = None,
        params: Dict[str, Any] | None = None,
    ) -> Any:
        """Issue a GET request and return the decoded JSON body.

        ``resource`` and ``identifier`` only label raised errors so the
        caller can tell which lookup failed.
        """
        url = f"{self.base_url}{path}"
        attempts = self.retries + 1
        attempt = 1
        while True:
            try:
                return self._get_once(url, resource=resource, identifier=identifier, params=params)
            except (UpstreamUnavailable, UpstreamTimeout) as exc:
                if attempt >= attempts:
                    raise
                logger.warning(
                    "Attempt %d/%d for %s %s failed: %s", attempt, attempts, resource, identifier, exc
                )
                attempt += 1

    def _get_once(
        self,
        url: str,
        *,
        resource: str,
        identifier: Any,
        params: Dict[str, Any] | None,
    ) -> Any:
        try:
            logger.debug("Sending GET request to %s", url)
            response = self.session.request(
                method="GET",
                url=url,
                params=params,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.Timeout as exc:
            logger.error("GET %s timed out after %.1fs", url, self.timeout)
            raise UpstreamTimeout(
                f"{resource} lookup timed out after {self.timeout}s",
                resource=resource,
                identifier=identifier,
            ) from exc
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            if status == 404:
                raise NotFound(f"{resource} not found", resource=resource, identifier=identifier) from exc
            logger.error("GET %s failed with status %s", url, status)
            raise UpstreamBadResponse(
                f"{resource} lookup returned HTTP {status}",
                resource=resource,
                identifier=identifier,
                upstream_status=status,
            ) from exc
        except requests.RequestException as exc:
            # The exception text embeds the full URL, query string included,
            # and the query string may carry a credential.
            logger.error("GET %s failed: %s", url, type(exc).__name__)
            raise UpstreamUnavailable(
                f"{resource} service unavailable",
                resource=resource,
                identifier=identifier,
            ) from exc

        try:
            return response.json()
        except ValueError as exc:
            logger.error("GET %s returned a body that is not JSON", url)
            raise UpstreamBadResponse(
                f"{resource} lookup returned an undecodable body",
                resource=resource,
                identifier=identifier,
                upstream_status=response.status_code,
            ) from exc

    def close(self) -> None:
        self.session.close()
