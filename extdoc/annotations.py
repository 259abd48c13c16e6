"""Decorator for attaching documentation fragments to Python code."""

from __future__ import annotations

import inspect
from typing import Callable, Optional, TypeVar

DOCUMENTATION_ATTRIBUTE = "__extended_documentation__"

_T = TypeVar("_T")


def extended_documentation(text: str) -> Callable[[_T], _T]:
    """Attach ``text`` to a class, function or module object.

    Usage::

        @extended_documentation("=== Orders\\n\\nPlaces and tracks orders.\\n\\n")
        class OrderService:
            @extended_documentation("==== place\\n\\nCreates an order.\\n\\n")
            def place(self, order): ...

    Packages may instead define a module-level ``__extended_documentation__``
    string in their ``__init__.py``.
    """
    if not isinstance(text, str):
        raise TypeError("extended_documentation expects a string fragment")

    def decorator(obj: _T) -> _T:
        setattr(obj, DOCUMENTATION_ATTRIBUTE, text)
        return obj

    return decorator


def documentation_of(obj: object) -> Optional[str]:
    """Return the fragment declared directly on ``obj``.

    Classes and modules are read through their own namespace so a fragment on
    a base class is not reported for its subclasses.
    """
    if inspect.isclass(obj) or inspect.ismodule(obj):
        value = vars(obj).get(DOCUMENTATION_ATTRIBUTE)
    else:
        value = getattr(obj, DOCUMENTATION_ATTRIBUTE, None)
    return value if isinstance(value, str) else None


__all__ = ["DOCUMENTATION_ATTRIBUTE", "documentation_of", "extended_documentation"]
