"""objkit: object-construction exercises (selector builder, shapes, JSON)."""
from __future__ import annotations

__version__ = "0.1.0"

from objkit.config import ObjkitConfig  # noqa: E402
from objkit.errors import ObjkitError, SerializationError  # noqa: E402
from objkit.selector import css_selector_builder  # noqa: E402
from objkit.serialization import from_json, to_json  # noqa: E402
from objkit.shapes import Rectangle  # noqa: E402

__all__ = [
    "__version__",
    "ObjkitConfig",
    "ObjkitError",
    "SerializationError",
    "css_selector_builder",
    "Rectangle",
    "to_json",
    "from_json",
]
