"""
Token value model.

Classification of raw values into supported kinds, the composite value base
class with owner tracking, and the color composite.
"""

from tokentree.values.color import ColorChannels, ColorSpace, ColorValue
from tokentree.values.composite import CompositeValue, is_composite_value
from tokentree.values.identify import identify_json_type, identify_type, is_json_value

__all__ = [
    "CompositeValue",
    "is_composite_value",
    "ColorValue",
    "ColorSpace",
    "ColorChannels",
    "identify_json_type",
    "identify_type",
    "is_json_value",
]
