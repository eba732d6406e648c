"""Switchyard: fluent resource-locator construction and tag-based dispatch.

- ``ResourceLocatorBuilder`` assembles optional scheme, host, port, path
  and query components into an immutable ``ResourceLocator``.
- ``DispatchRegistry`` routes a message-type tag to one handler, replacing
  conditional ladders keyed on type strings.
"""

__version__ = "0.1.0"

from switchyard.core.builder import ResourceLocatorBuilder
from switchyard.core.registry import DispatchRegistry
from switchyard.errors import HandlerNotFoundError, SwitchyardError
from switchyard.models.locator import ResourceLocator

__all__ = [
    "DispatchRegistry",
    "HandlerNotFoundError",
    "ResourceLocator",
    "ResourceLocatorBuilder",
    "SwitchyardError",
    "__version__",
]
