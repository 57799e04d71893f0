"""Apply font family and size to the text elements of a figure

Element names and inheritance follow ggplot2's `theme()`:

    text ─┬─ title ─┬─ axis_title ─┬─ axis_title_x
          │         │              └─ axis_title_y
          │         └─ legend_title
          ├─ axis_text ──┬─ axis_text_x
          │              └─ axis_text_y
          └─ legend_text

`geom_text` styles the labels drawn on the axes (`Axes.texts`) and, as in
ggplot2, does not inherit from `text`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace

import matplotlib.style as _style
from matplotlib.figure import Figure

from .fonts import FontRegistry, default_registry
from .units import positive

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

STYLE = "figtext.figtext"


@dataclass(frozen=True)
class TextElement:
    family: str | None = None
    size: float | None = None
    color: str | None = None
    weight: str | int | None = None
    style: str | None = None

    def inherit(self, parent: TextElement | None) -> TextElement:
        """Fill unset fields from `parent`"""
        if parent is None:
            return self
        return replace(
            parent,
            **{f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None},
        )

    def is_blank(self):
        return all(getattr(self, f.name) is None for f in fields(self))


def element_text(family=None, size=None, color=None, weight=None, style=None):
    if size is not None:
        size = positive(size, "size")
    return TextElement(family=family, size=size, color=color, weight=weight, style=style)


def _resolved(element: TextElement, registry: FontRegistry):
    if element.family is None:
        return element
    return replace(element, family=registry.resolve(element.family))


def _style_text(t, e: TextElement):
    if e.family is not None:
        t.set_fontfamily(e.family)
    if e.size is not None:
        t.set_fontsize(e.size)
    if e.color is not None:
        t.set_color(e.color)
    if e.weight is not None:
        t.set_fontweight(e.weight)
    if e.style is not None:
        t.set_fontstyle(e.style)


def _style_ticks(axis, e: TextElement):
    kw = {}
    if e.family is not None:
        kw["labelfontfamily"] = e.family
    if e.size is not None:
        kw["labelsize"] = e.size
    if e.color is not None:
        kw["labelcolor"] = e.color
    if kw:
        axis.set_tick_params(which="both", **kw)
    # tick_params has no weight/style; new ticks copy these from the first one
    for tick in [*axis.get_major_ticks(), *axis.get_minor_ticks()]:
        for label in (tick.label1, tick.label2):
            if e.weight is not None:
                label.set_fontweight(e.weight)
            if e.style is not None:
                label.set_fontstyle(e.style)


def _figure_and_axes(target):
    if isinstance(target, Figure):
        return target, list(target.axes)
    return target.figure, [target]


def theme(
    target,
    *,
    text=None,
    title=None,
    axis_title=None,
    axis_title_x=None,
    axis_title_y=None,
    axis_text=None,
    axis_text_x=None,
    axis_text_y=None,
    legend_text=None,
    legend_title=None,
    geom_text=None,
    registry=None,
):
    """Style the text of a Figure (all its axes) or a single Axes

    Every argument is a `TextElement` (see `element_text()`) or None to leave
    that element alone. Font families may be aliases from `registry`
    (default: the session registry); unknown names raise `FontNotFound`
    before anything is modified.
    """
    if registry is None:
        registry = default_registry()

    title = title.inherit(text) if title is not None else text
    axis_title = axis_title.inherit(title) if axis_title is not None else title
    legend_title = legend_title.inherit(title) if legend_title is not None else title
    axis_text = axis_text.inherit(text) if axis_text is not None else text
    legend_text = legend_text.inherit(text) if legend_text is not None else text
    axis_title_x = axis_title_x.inherit(axis_title) if axis_title_x is not None else axis_title
    axis_title_y = axis_title_y.inherit(axis_title) if axis_title_y is not None else axis_title
    axis_text_x = axis_text_x.inherit(axis_text) if axis_text_x is not None else axis_text
    axis_text_y = axis_text_y.inherit(axis_text) if axis_text_y is not None else axis_text

    elements = {
        "title": title,
        "axis_title_x": axis_title_x,
        "axis_title_y": axis_title_y,
        "axis_text_x": axis_text_x,
        "axis_text_y": axis_text_y,
        "legend_text": legend_text,
        "legend_title": legend_title,
        "geom_text": geom_text,
    }
    elements = {
        k: _resolved(e, registry) for k, e in elements.items() if e is not None and not e.is_blank()
    }

    fig, axes = _figure_and_axes(target)
    if "title" in elements and getattr(fig, "_suptitle", None) is not None:
        _style_text(fig._suptitle, elements["title"])

    for ax in axes:
        if "title" in elements:
            _style_text(ax.title, elements["title"])
        if "axis_title_x" in elements:
            _style_text(ax.xaxis.label, elements["axis_title_x"])
        if "axis_title_y" in elements:
            _style_text(ax.yaxis.label, elements["axis_title_y"])
        if "axis_text_x" in elements:
            _style_ticks(ax.xaxis, elements["axis_text_x"])
        if "axis_text_y" in elements:
            _style_ticks(ax.yaxis, elements["axis_text_y"])
        legend = ax.get_legend()
        if legend is not None and "legend_text" in elements:
            for t in legend.get_texts():
                _style_text(t, elements["legend_text"])
        if legend is not None and "legend_title" in elements:
            _style_text(legend.get_title(), elements["legend_title"])
        if "geom_text" in elements:
            for t in ax.texts:
                _style_text(t, elements["geom_text"])

    logger.debug("Applied theme elements %s to %d axes", sorted(elements), len(axes))
    return fig


def rc_text(element: TextElement, registry=None) -> dict:
    """rcParams that make `element` the default for all text drawn afterwards

    Use with `matplotlib.rc_context()` or `rcParams.update()`.
    """
    if registry is None:
        registry = default_registry()
    e = _resolved(element, registry)
    rc = {}
    if e.family is not None:
        rc["font.family"] = [e.family]
    if e.size is not None:
        rc["font.size"] = e.size
    if e.color is not None:
        rc["text.color"] = e.color
        rc["axes.labelcolor"] = e.color
        rc["xtick.labelcolor"] = e.color
        rc["ytick.labelcolor"] = e.color
    if e.weight is not None:
        rc["font.weight"] = e.weight
    if e.style is not None:
        rc["font.style"] = e.style
    return rc


def use_style():
    """Apply the package style sheet (figtext.mplstyle)"""
    _style.use(STYLE)
