"""Core mechanisms: the locator builder and the dispatch registry."""

from switchyard.core.builder import ResourceLocatorBuilder
from switchyard.core.registry import DispatchRegistry

__all__ = ["DispatchRegistry", "ResourceLocatorBuilder"]
