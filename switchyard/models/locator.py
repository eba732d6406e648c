"""Immutable resource locator — the rendered output of the locator builder.

A ``ResourceLocator`` holds five optional components and renders them into
a single canonical string.  Rendering is a total function: absent, empty,
or non-positive components are skipped rather than rejected, and values
of the wrong type are stored as absent.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, field_validator

if TYPE_CHECKING:
    from switchyard.core.builder import ResourceLocatorBuilder

SCHEME_SEPARATOR = "://"
PATH_SEPARATOR = "/"
QUERY_SEPARATOR = "?"


class ResourceLocator(BaseModel):
    """A composed network address, produced by ``ResourceLocatorBuilder``.

    Instances are frozen: the rendered form is a pure function of the five
    fields and never changes after construction.

    Examples
    --------
    >>> ResourceLocator.builder("https://", "mywebsite").with_port(8080).build().render()
    'https://mywebsite:8080'
    """

    model_config = ConfigDict(frozen=True)

    scheme: str | None = None
    host: str | None = None
    port: int | None = None
    path: str | None = None
    query: str | None = None

    @field_validator("scheme", "host", "path", "query", mode="before")
    @classmethod
    def _drop_non_text(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None

    @field_validator("port", mode="before")
    @classmethod
    def _drop_non_integer_port(cls, value: Any) -> int | None:
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        return value

    @classmethod
    def builder(cls, scheme: str | None, host: str | None) -> ResourceLocatorBuilder:
        """Start building a locator from its two required components."""
        from switchyard.core.builder import ResourceLocatorBuilder

        return ResourceLocatorBuilder.create(scheme, host)

    def to_builder(self) -> ResourceLocatorBuilder:
        """Return a new builder pre-populated with this locator's fields."""
        return (
            self.builder(self.scheme, self.host)
            .with_port(self.port)
            .with_path(self.path)
            .with_query(self.query)
        )

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> str:
        """Render the locator as ``scheme://host:port/path?query``.

        Each step is skipped when its component is absent:

        1. scheme, with any trailing ``://`` stripped, followed by ``://``
        2. host, verbatim
        3. ``:port`` when port is positive
        4. path, prefixed with ``/`` only if it does not already start with one
        5. query, prefixed with ``?`` only if it does not already start with one
        """
        parts: list[str] = []

        if self.scheme:
            parts.append(_strip_scheme_separator(self.scheme) + SCHEME_SEPARATOR)

        if self.host:
            parts.append(self.host)

        if self.port is not None and self.port > 0:
            parts.append(f":{self.port}")

        parts.append(_with_leading(self.path, PATH_SEPARATOR))
        parts.append(_with_leading(self.query, QUERY_SEPARATOR))

        return "".join(parts)

    def __str__(self) -> str:
        return self.render()


def _strip_scheme_separator(scheme: str) -> str:
    if scheme.endswith(SCHEME_SEPARATOR):
        return scheme[: -len(SCHEME_SEPARATOR)]
    return scheme


def _with_leading(segment: str | None, separator: str) -> str:
    """Return *segment* prefixed with *separator* unless it already starts with it."""
    if not segment:
        return ""
    if segment.startswith(separator):
        return segment
    return separator + segment
