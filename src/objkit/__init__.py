"""objkit -- object construction and serialization helpers."""

from objkit.jsonbridge import ConstructionError, ParseError, decode, encode
from objkit.selector import (
    DuplicateSelectorPartError,
    SelectorBuilder,
    SelectorOrderError,
    css_selector_builder,
)
from objkit.shapes import Rectangle

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Rectangle",
    "encode",
    "decode",
    "ParseError",
    "ConstructionError",
    "SelectorBuilder",
    "css_selector_builder",
    "DuplicateSelectorPartError",
    "SelectorOrderError",
]
