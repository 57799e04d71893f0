"""Physical unit conversions for sizing exported figures

Document editors show the text-line width in centimeters, while
`Figure.savefig()` sizes figures in inches. A figure exported at the
document's line width can be placed without rescaling, so its text keeps
exactly the point size it was drawn with.
"""

import math
from enum import Enum
from numbers import Real

from .errors import InvalidArgument

CM_PER_INCH = 2.54
MM_PER_INCH = 25.4

# ggplot2's `.pt`: TeX points per millimeter. Geom text sizes are given in
# mm there, so `size = 12 / PT` draws a 12 pt label.
PT = 72.27 / 25.4


class Unit(str, Enum):
    """Length units accepted by the exporter"""

    INCH = "in"
    CENTIMETER = "cm"
    MILLIMETER = "mm"
    PIXEL = "px"

    @classmethod
    def parse(cls, unit):
        if isinstance(unit, cls):
            return unit
        try:
            return cls(str(unit).strip().lower())
        except ValueError:
            valid = ", ".join(u.value for u in cls)
            raise InvalidArgument(f"Unknown unit {unit!r} (expected one of {valid})")


def positive(x, name="value"):
    """Return `x` as a float, requiring a finite number > 0"""
    if isinstance(x, bool) or not isinstance(x, Real):
        raise InvalidArgument(f"{name} must be a real number, got {x!r}")
    x = float(x)
    if not math.isfinite(x):
        raise InvalidArgument(f"{name} must be finite, got {x}")
    if x <= 0:
        raise InvalidArgument(f"{name} must be positive, got {x}")
    return x


def convert(length_cm):
    """Convert a length in centimeters to inches"""
    return positive(length_cm, "length") / CM_PER_INCH


cm_to_inch = convert


def inch_to_cm(length_in):
    return positive(length_in, "length") * CM_PER_INCH


def mm_to_inch(length_mm):
    return positive(length_mm, "length") / MM_PER_INCH


def to_inches(value, unit, dpi=None):
    """Convert `value` given in `unit` to inches

    Pixels need the export resolution `dpi` to have a physical size.
    """
    unit = Unit.parse(unit)
    if unit is Unit.INCH:
        return positive(value, "length")
    if unit is Unit.CENTIMETER:
        return convert(value)
    if unit is Unit.MILLIMETER:
        return mm_to_inch(value)
    if dpi is None:
        raise InvalidArgument("Converting pixels to inches requires a dpi")
    return positive(value, "length") / positive(dpi, "dpi")


def pt_to_mm(size_pt):
    """Font size in points to ggplot-style millimeters"""
    return positive(size_pt, "size") / PT


def mm_to_pt(size_mm):
    return positive(size_mm, "size") * PT
