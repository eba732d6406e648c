"""Fluent builder for ``ResourceLocator``.

The builder is a mutable, single-owner accumulator.  Scheme and host are
fixed at creation; port, path and query are set through chained calls
that each return the same builder.  ``build()`` takes an immutable
snapshot and may be called any number of times.

A single builder instance must not be mutated from several threads at
once.  Independent builders on separate threads are fine, and built
locators are frozen and freely shareable.
"""

from __future__ import annotations

import logging

from switchyard.models.locator import ResourceLocator

logger = logging.getLogger(__name__)


class ResourceLocatorBuilder:
    """Accumulates locator components and produces ``ResourceLocator`` snapshots.

    No validation is performed on any component.  Values are stored
    verbatim and interpreted only when the built locator is rendered.

    Usage
    -----
    >>> locator = (
    ...     ResourceLocatorBuilder.create("https://", "binance")
    ...     .with_port(8080)
    ...     .with_path("/wallet")
    ...     .build()
    ... )
    >>> locator.render()
    'https://binance:8080/wallet'
    """

    def __init__(self, scheme: str | None, host: str | None) -> None:
        self._scheme = scheme
        self._host = host
        self._port: int | None = None
        self._path: str | None = None
        self._query: str | None = None

    @classmethod
    def create(cls, scheme: str | None, host: str | None) -> ResourceLocatorBuilder:
        """Start a new construction with the two required components."""
        return cls(scheme, host)

    # ------------------------------------------------------------------
    # Options
    # ------------------------------------------------------------------

    def with_port(self, port: int | None) -> ResourceLocatorBuilder:
        self._port = port
        return self

    def with_path(self, path: str | None) -> ResourceLocatorBuilder:
        self._path = path
        return self

    def with_query(self, query: str | None) -> ResourceLocatorBuilder:
        self._query = query
        return self

    # ------------------------------------------------------------------
    # Terminal
    # ------------------------------------------------------------------

    def build(self) -> ResourceLocator:
        """Return an immutable snapshot of the current components."""
        locator = ResourceLocator(
            scheme=self._scheme,
            host=self._host,
            port=self._port,
            path=self._path,
            query=self._query,
        )
        logger.debug("Built locator %s", locator)
        return locator

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(scheme={self._scheme!r}, host={self._host!r}, "
            f"port={self._port!r}, path={self._path!r}, query={self._query!r})"
        )
