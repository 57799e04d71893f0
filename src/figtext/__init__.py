"""Font family, font size and fixed-size export helpers for matplotlib"""

from .errors import FontNotFound, InvalidArgument
from .export import (
    ExportSpec,
    build_export_spec,
    line_width_spec,
    reopen,
    retain,
    save,
)
from .fonts import FontBinding, FontRegistry, catalog, default_registry, find_font, font_add
from .plots import demo_data, text_plot
from .theme import TextElement, element_text, rc_text, theme, use_style
from .units import PT, Unit, cm_to_inch, convert, inch_to_cm, mm_to_inch, to_inches

__all__ = [
    "FontNotFound",
    "InvalidArgument",
    "ExportSpec",
    "build_export_spec",
    "line_width_spec",
    "reopen",
    "retain",
    "save",
    "FontBinding",
    "FontRegistry",
    "catalog",
    "default_registry",
    "find_font",
    "font_add",
    "demo_data",
    "text_plot",
    "TextElement",
    "element_text",
    "rc_text",
    "theme",
    "use_style",
    "PT",
    "Unit",
    "cm_to_inch",
    "convert",
    "inch_to_cm",
    "mm_to_inch",
    "to_inches",
]
