"""selectorkit: CSS selector builder plus small object and JSON helpers."""
from __future__ import annotations

__version__ = "0.1.0"

from selectorkit.config import SelectorKitConfig  # noqa: E402
from selectorkit.errors import SelectorKitError  # noqa: E402
from selectorkit.jsonbridge import from_json, get_json  # noqa: E402
from selectorkit.selector import css_selector_builder  # noqa: E402
from selectorkit.shapes import Rectangle  # noqa: E402

__all__ = [
    "__version__",
    "SelectorKitConfig",
    "SelectorKitError",
    "Rectangle",
    "get_json",
    "from_json",
    "css_selector_builder",
]
