"""
Color values.

ColorValue is the reference composite value: three numeric channels in the
color space's native range plus an optional alpha. Alpha is clamped to
[0, 1] whenever it is written and reads as fully opaque when absent.
"""

from enum import Enum
from typing import Any, ClassVar

from pydantic import field_validator

from tokentree.core.types import JsonValue, TokenType
from tokentree.values.composite import CompositeValue

ColorChannels = tuple[float, float, float]

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class ColorSpace(str, Enum):
    """Color spaces a ColorValue can be expressed in."""

    SRGB = "srgb"


def _clamp(num: float, low: float, high: float) -> float:
    return min(max(num, low), high)


class ColorValue(CompositeValue):
    """
    An sRGB color.

    Channels are not clamped; an out-of-gamut color is still a color. The
    alpha channel is, because anything outside [0, 1] has no meaning.
    """

    value_type: ClassVar[TokenType] = TokenType.COLOR

    channels: ColorChannels
    alpha: float | None = None

    @field_validator("alpha")
    @classmethod
    def _clamp_alpha(cls, alpha: float | None) -> float | None:
        return None if alpha is None else _clamp(alpha, 0.0, 1.0)

    def get_channels(self) -> ColorChannels:
        return self.channels

    def set_channels(self, channels: ColorChannels) -> None:
        self.channels = channels

    def has_alpha(self) -> bool:
        return self.alpha is not None

    def get_alpha(self) -> float:
        return self.alpha if self.alpha is not None else 1.0

    def set_alpha(self, alpha: float | None) -> None:
        self.alpha = alpha

    def get_color_space(self) -> ColorSpace:
        return ColorSpace.SRGB

    @classmethod
    def from_hex(cls, hex_color: str) -> "ColorValue":
        """
        Create a color from a CSS hex string.

        Params:
            hex_color: "#rgb", "#rgba", "#rrggbb" or "#rrggbbaa" (the "#" is optional)

        Returns:
            ColorValue with channels (and alpha, for 4 and 8 digit forms) in [0, 1]

        Raises:
            ValueError: If the string is not a hex color
        """
        digits = hex_color[1:] if hex_color.startswith("#") else hex_color
        if len(digits) not in (3, 4, 6, 8) or not _HEX_DIGITS.issuperset(digits):
            raise ValueError(f"Invalid hex color: {hex_color!r}")

        if len(digits) in (3, 4):
            digits = "".join(d * 2 for d in digits)

        components = [int(digits[i : i + 2], 16) / 255 for i in range(0, len(digits), 2)]
        alpha = components[3] if len(components) == 4 else None
        return cls(channels=tuple(components[:3]), alpha=alpha)

    def to_hex(self) -> str:
        """Return "#rrggbb", or "#rrggbbaa" when an alpha is set."""
        components = list(self.channels)
        if self.has_alpha():
            components.append(self.get_alpha())
        return "#" + "".join(
            f"{round(_clamp(c, 0.0, 1.0) * 255):02x}" for c in components
        )

    def to_dtcg(self) -> JsonValue:
        dtcg: dict[str, Any] = {
            "colorSpace": self.get_color_space().value,
            "components": list(self.channels),
        }
        if self.has_alpha():
            dtcg["alpha"] = self.alpha
        return dtcg

    @staticmethod
    def is_dtcg_color(value: Any) -> bool:
        """Check whether a raw DTCG `$value` object describes an sRGB color."""
        if not isinstance(value, dict):
            return False
        if not set(value).issubset({"colorSpace", "components", "alpha"}):
            return False
        components = value.get("components")
        return (
            value.get("colorSpace") == ColorSpace.SRGB.value
            and isinstance(components, list)
            and len(components) == 3
            and all(
                isinstance(c, (int, float)) and not isinstance(c, bool)
                for c in components
            )
            and isinstance(value.get("alpha", 1.0), (int, float))
        )

    @classmethod
    def from_dtcg(cls, value: dict[str, Any]) -> "ColorValue":
        """
        Create a color from a DTCG color object.

        Params:
            value: Object with "colorSpace", "components" and optional "alpha"

        Returns:
            The equivalent ColorValue

        Raises:
            ValueError: If the object is not an sRGB color
        """
        if not cls.is_dtcg_color(value):
            raise ValueError(f"Not a DTCG sRGB color: {value!r}")
        return cls(channels=tuple(value["components"]), alpha=value.get("alpha"))
