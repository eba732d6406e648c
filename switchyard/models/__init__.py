"""Frozen pydantic models shared across switchyard."""

from switchyard.models.connection import ConnectionProfile
from switchyard.models.locator import ResourceLocator
from switchyard.models.messages import Message

__all__ = ["ConnectionProfile", "Message", "ResourceLocator"]
