"""Color conversion between RGB, HSV, hex and websafe representations.

All functions are pure: they take plain numbers or strings and return new
tuples or strings. There is no module state apart from read-only constants,
so everything here is safe to call from any thread.

## Representations

| Name    | Python value                  | Range                                 |
|---------|-------------------------------|---------------------------------------|
| RGB     | `(r, g, b)` ints              | 0-255 per channel                     |
| HSV     | `(h, s, v)`                   | h in [0, 360) degrees, s and v in [0, 1] |
| Hex     | `"FF8800"`                    | 6 uppercase digits, no `#`            |
| Websafe | RGB tuple                     | channels in {0, 51, 102, 153, 204, 255} |

## Out-of-range policy

Numbers never raise. `websafe` clamps to 0-255, `real_to_byte` caps at 255,
and `dec_to_hex` resets anything outside 0-255 (or not a number) to `00`.
NaN and infinite inputs are treated as 0, except that +inf caps at 255.
Only decoders of text raise, with `InvalidFormatError`.

Example:
    ```python
    >>> rgb_to_hsv(255, 128, 0)
    (30, 1.0, 1.0)
    >>> hsv_to_rgb(30, 1.0, 1.0)
    (255, 128, 0)
    >>> rgb_to_hex(255, 128, 0)
    'FF8000'
    >>> websafe(130, 20, 240)
    (153, 0, 255)
    ```
"""

import logging
import math
import numbers
import re
from collections.abc import Sequence
from decimal import Decimal
from typing import Any, Optional

from colorpicker.exceptions import InvalidFormatError

logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]
HSV = tuple[float, float, float]

HEX_DIGITS = "0123456789ABCDEF"
_HEX_VALUES = {digit: index for index, digit in enumerate(HEX_DIGITS)}

WEBSAFE_STEP = 51
WEBSAFE_VALUES = (0, 51, 102, 153, 204, 255)
# Lower bounds of the [low, low + 51] buckets, scanned in order
_WEBSAFE_BUCKETS = tuple(range(0, 256, WEBSAFE_STEP))

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _round_half_up(x: float) -> int:
    # round() is banker's rounding; channel math wants .5 to go up
    return math.floor(x + 0.5)


def _invalid(value: Any, reason: str, expected: Optional[str] = None) -> InvalidFormatError:
    logger.debug(f"Rejecting {value!r}: {reason}")
    if expected is None:
        return InvalidFormatError(value, reason)
    return InvalidFormatError(value, reason, expected=expected)


def _unpack(values: Sequence, kind: str) -> tuple:
    if isinstance(values, (str, bytes)):
        raise _invalid(values, "expected a sequence of 3 numbers", f"three {kind} values")
    try:
        first, second, third = values
    except (TypeError, ValueError) as e:
        raise _invalid(values, "expected exactly 3 values", f"three {kind} values") from e
    return first, second, third


def real_to_byte(fraction: float) -> int:
    """
    Convert a 0-1 fraction to a 0-255 channel value.

    Multiplies by 256 and rounds, capping the result at 255. There is no
    lower bound: a negative fraction gives a negative result. NaN and -inf
    give 0; +inf gives 255.
    """
    scaled = fraction * 256
    if not math.isfinite(scaled):
        return 255 if scaled > 0 else 0
    return min(255, _round_half_up(scaled))


def hsv_to_rgb(hue: float, saturation: float, value: float) -> RGB:
    """
    Convert HSV to RGB.

    Args:
        hue: Hue in degrees. Any real number; it is reduced into [0, 360).
            NaN and infinite hues are read as 0.
        saturation: Saturation, 0-1
        value: Value/brightness, 0-1

    Returns:
        (r, g, b) channel values
    """
    hue = hue % 360 if math.isfinite(hue) else 0.0
    position = hue / 60
    sector = math.floor(position)
    fractional = position - sector
    # float modulo can land exactly on 360; that is sector 0
    sector %= 6

    v = value
    p = v * (1 - saturation)
    q = v * (1 - fractional * saturation)
    t = v * (1 - (1 - fractional) * saturation)

    if sector == 0:
        r, g, b = v, t, p
    elif sector == 1:
        r, g, b = q, v, p
    elif sector == 2:
        r, g, b = p, v, t
    elif sector == 3:
        r, g, b = p, q, v
    elif sector == 4:
        r, g, b = t, p, v
    else:
        r, g, b = v, p, q

    return real_to_byte(r), real_to_byte(g), real_to_byte(b)


def rgb_to_hsv(red: int, green: int, blue: int) -> HSV:
    """
    Convert RGB to HSV.

    Hue is rounded to a whole degree and wrapped into [0, 360); saturation
    and value stay fractional. Achromatic colors (all channels equal) get
    hue 0. When two channels tie for the maximum, red wins over green and
    green over blue.

    Returns:
        (hue, saturation, value)
    """
    r = red / 255
    g = green / 255
    b = blue / 255

    min_c = min(r, g, b)
    max_c = max(r, g, b)
    delta = max_c - min_c

    if max_c == min_c:
        hue = 0.0
    elif max_c == r:
        hue = 60 * (g - b) / delta
        if g < b:
            hue += 360
    elif max_c == g:
        hue = 60 * (b - r) / delta + 120
    else:
        hue = 60 * (r - g) / delta + 240

    saturation = 0.0 if max_c == 0 else 1 - min_c / max_c

    return _round_half_up(hue) % 360, saturation, max_c


def dec_to_hex(n: Any) -> str:
    """
    Convert a channel value to a two digit uppercase hex pair.

    The input is coerced to an integer: floats and Decimals are truncated
    and strings use their leading digits ("12px" is 12). Anything that is not a number,
    or falls outside 0-255, becomes "00". Out-of-range values are reset,
    not clamped: dec_to_hex(300) is "00", not "FF".
    """
    number = _coerce_int(n)
    if number is None or number > 255 or number < 0:
        number = 0

    return HEX_DIGITS[number // 16] + HEX_DIGITS[number % 16]


def _coerce_int(n: Any) -> Optional[int]:
    if isinstance(n, bool):
        return None
    if isinstance(n, numbers.Integral):
        return int(n)
    if isinstance(n, numbers.Real):
        return int(n) if math.isfinite(n) else None
    # Decimal is not registered as numbers.Real
    if isinstance(n, Decimal):
        return int(n) if n.is_finite() else None
    if isinstance(n, str):
        match = _LEADING_INT.match(n)
        return int(match.group(1)) if match else None
    return None


def hex_to_dec(pair: str) -> int:
    """
    Convert a two digit hex pair (any case) to an integer 0-255.

    Raises:
        InvalidFormatError: If the input is not exactly two hex digits
    """
    expected = "a 2-digit hex pair such as 7F"
    if not isinstance(pair, str):
        raise _invalid(pair, f"expected a string, got {type(pair).__name__}", expected)
    if len(pair) != 2:
        raise _invalid(pair, f"expected 2 characters, got {len(pair)}", expected)

    high = _HEX_VALUES.get(pair[0].upper())
    low = _HEX_VALUES.get(pair[1].upper())
    if high is None or low is None:
        raise _invalid(pair, "not a hex digit", expected)

    return high * 16 + low


def hex_to_rgb(hex6: str) -> RGB:
    """
    Convert a 6 digit hex string (no '#') to RGB.

    Raises:
        InvalidFormatError: If the string is not exactly 6 hex digits
    """
    if not isinstance(hex6, str):
        raise _invalid(hex6, f"expected a string, got {type(hex6).__name__}")
    if len(hex6) != 6:
        raise _invalid(hex6, f"expected 6 characters, got {len(hex6)}")

    try:
        return hex_to_dec(hex6[0:2]), hex_to_dec(hex6[2:4]), hex_to_dec(hex6[4:6])
    except InvalidFormatError as e:
        raise _invalid(hex6, f"{e.value!r} is not a hex pair") from e


def rgb_to_hex(red: Any, green: Any, blue: Any) -> str:
    """Convert RGB to a 6 digit uppercase hex string, e.g. (255, 0, 0) -> 'FF0000'."""
    return dec_to_hex(red) + dec_to_hex(green) + dec_to_hex(blue)


def websafe(red: float, green: float, blue: float) -> RGB:
    """
    Snap each channel to the closest websafe value.

    Channels are clamped to 0-255, then matched against the buckets
    [0, 51], [51, 102], ... in order. The first bucket that contains the
    value wins, and the value snaps to the bucket's upper end when it is
    more than 25 above the lower end.

    Example:
        ```python
        >>> websafe(130, 25, 26)
        (153, 0, 51)
        ```
    """
    return _websafe_channel(red), _websafe_channel(green), _websafe_channel(blue)


def _websafe_channel(channel: float) -> int:
    channel = min(max(0, channel), 255)
    low = next(
        low for low in _WEBSAFE_BUCKETS if low <= channel <= low + WEBSAFE_STEP
    )
    return low + WEBSAFE_STEP if channel - low > 25 else low


def hsv_to_rgb_seq(hsv: Sequence[float]) -> RGB:
    """Same as hsv_to_rgb, taking one (h, s, v) sequence."""
    return hsv_to_rgb(*_unpack(hsv, "HSV"))


def rgb_to_hsv_seq(rgb: Sequence[int]) -> HSV:
    """Same as rgb_to_hsv, taking one (r, g, b) sequence."""
    return rgb_to_hsv(*_unpack(rgb, "RGB"))


def rgb_to_hex_seq(rgb: Sequence[int]) -> str:
    """Same as rgb_to_hex, taking one (r, g, b) sequence."""
    return rgb_to_hex(*_unpack(rgb, "RGB"))


def websafe_seq(rgb: Sequence[float]) -> RGB:
    """Same as websafe, taking one (r, g, b) sequence."""
    return websafe(*_unpack(rgb, "RGB"))


def normalize_hex(text: str) -> str:
    """
    Normalize user supplied hex text to the canonical 6 digit form.

    Strips whitespace and one leading '#', expands 3 digit shorthand
    ('#369' -> '336699') and uppercases.

    Raises:
        InvalidFormatError: If what remains is not 3 or 6 hex digits
    """
    if not isinstance(text, str):
        raise _invalid(text, f"expected a string, got {type(text).__name__}")

    cleaned = text.strip()
    if cleaned.startswith("#"):
        cleaned = cleaned[1:]

    if len(cleaned) == 3:
        cleaned = "".join(c * 2 for c in cleaned)

    if len(cleaned) != 6:
        raise _invalid(text, f"expected 3 or 6 hex digits, got {len(cleaned)} characters")

    return rgb_to_hex(*hex_to_rgb(cleaned))


def hue_to_rgb(hue: float) -> RGB:
    """Fully saturated, full brightness color of a hue."""
    return hsv_to_rgb(hue, 1, 1)


def hsv_to_percent(hue: float, saturation: float, value: float) -> tuple[float, int, int]:
    """Express saturation and value as whole percentages (0.5 -> 50)."""
    return hue, _round_half_up(saturation * 100), _round_half_up(value * 100)


def percent_to_hsv(hue: float, saturation: float, value: float) -> HSV:
    """Inverse of hsv_to_percent: saturation and value from 0-100 to 0-1."""
    return hue, saturation / 100, value / 100
