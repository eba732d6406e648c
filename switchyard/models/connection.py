"""Connection profile — caller-owned connection settings.

A ``ConnectionProfile`` is passed explicitly to whatever needs it.  There
is no process-wide instance and no lazy initialization; copies are made
with ``model_copy(update=...)``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from switchyard.models.locator import ResourceLocator


class ConnectionProfile(BaseModel):
    """Host and port of a backing service, plus optional scheme and database."""

    model_config = ConfigDict(frozen=True)

    host: str
    port: int | None = None
    scheme: str | None = None
    database: str | None = None

    def locator(self) -> ResourceLocator:
        """Return the locator for this connection, with the database as path."""
        return (
            ResourceLocator.builder(self.scheme, self.host)
            .with_port(self.port)
            .with_path(self.database)
            .build()
        )
