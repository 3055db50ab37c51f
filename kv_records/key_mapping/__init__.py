"""Key namespacing utilities."""

from .namespacer import KeyNamespacer


__all__ = ["KeyNamespacer"]
