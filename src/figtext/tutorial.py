#!/usr/bin/env python3
"""
How to change the font and the font size of matplotlib plots, and how to
export them so text has the same size in every figure of a document.

Usage:
  python -m figtext.tutorial [--out-dir DIR] [--font FAMILY=ALIAS ...]
                             [--line-cm 16] [--height 3] [--dpi 300] [--size 12]

Exported figures often end up with tiny text, and text size varies between
plots once they are pasted into a document and resized there. The fix is to
style the text in points and export the plot at exactly the size it will
have in the document. Steps:

 1. Register fonts under short aliases (`FontRegistry.add`). The font has
    to be installed or live in a directory listed in FIGTEXT_FONT_PATH.
 2. Style all text, only some elements, or only the labels drawn with
    `text_plot` (`theme` with `element_text`).
 3. Export at a fixed size and dpi (`build_export_spec` + `save`). Never
    resize the image in the document afterwards.
 4. To span a whole text line, read the line length off the document's
    ruler (say 16 cm) and use `convert(16)` = 6.299 in as the width.
"""

import argparse
import logging
import sys
from pathlib import Path

import matplotlib.pyplot as plt

from .errors import InvalidArgument
from .export import build_export_spec, line_width_spec, save
from .fonts import FontRegistry
from .plots import demo_data, text_plot
from .theme import element_text, theme, use_style
from .units import convert

logger = logging.getLogger(__name__)

# Bundled with matplotlib, so the walkthrough runs without installing fonts
DEFAULT_FONTS = {
    "DejaVu Sans": "Sans",
    "DejaVu Serif": "Serif",
    "DejaVu Sans Mono": "Mono",
}


def parse_font(arg):
    family, sep, alias = arg.partition("=")
    if not sep or not family.strip() or not alias.strip():
        raise argparse.ArgumentTypeError(f"expected FAMILY=ALIAS, got {arg!r}")
    return family.strip(), alias.strip()


def parse_args(argv=None):
    p = argparse.ArgumentParser(
        prog="python -m figtext.tutorial",
        description="Font family and size walkthrough with fixed-size exports",
    )
    p.add_argument("--out-dir", type=Path, default=Path("."), help="where to write the PNGs")
    p.add_argument(
        "--font",
        type=parse_font,
        action="append",
        metavar="FAMILY=ALIAS",
        help="font to register (repeatable); the first alias styles the export",
    )
    p.add_argument("--line-cm", type=float, default=16.0, help="document text line length [cm]")
    p.add_argument("--height", type=float, default=3.0, help="export height [in]")
    p.add_argument("--dpi", type=int, default=300)
    p.add_argument("--size", type=float, default=12.0, help="text size [pt]")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)


def run(out_dir, fonts, line_cm=16.0, height=3.0, dpi=300, size=12.0):
    """Walk through the styling and export steps; return the written files"""
    out_dir = Path(out_dir).expanduser()
    out_dir.mkdir(parents=True, exist_ok=True)

    # 1. Register fonts. The first name is the catalog family, the second the
    #    alias used in style directives from here on.
    if not fonts:
        raise InvalidArgument("At least one FAMILY=ALIAS font is needed")
    registry = FontRegistry()
    for family, alias in fonts:
        registry.add(family, alias)
    aliases = list(registry)
    main, other = aliases[0], aliases[-1]

    use_style()
    x, y, labels = demo_data()

    # 2a. Plain plot
    fig, ax = text_plot(x, y, labels)
    plt.close(fig)

    # 2b. All text elements (titles, axis labels, tick labels, legend)
    fig, ax = text_plot(x, y, labels)
    theme(fig, text=element_text(family=main), registry=registry)
    plt.close(fig)

    # 2c. Only the x tick labels
    fig, ax = text_plot(x, y, labels)
    theme(fig, axis_text_x=element_text(family=other), registry=registry)
    plt.close(fig)

    # 2d. Only the labels drawn on the axes
    fig, ax = text_plot(x, y, labels, family=other, registry=registry)
    plt.close(fig)

    # 3. Fixed size export: 4 x 3 in at `dpi`, all text at `size` points
    fig, ax = text_plot(x, y, labels, family=other, size=size, registry=registry)
    theme(
        fig,
        text=element_text(size=size),
        axis_text_x=element_text(family=other),
        registry=registry,
    )
    written = [save(fig, out_dir / "MyPlot.png", build_export_spec(4, height, dpi))]

    # 4. Width of one document text line
    logger.info("A %.4g cm text line is %.4f in wide", line_cm, convert(line_cm))
    written.append(save(fig, out_dir / "MyPlot_line.png", line_width_spec(line_cm, height, dpi)))
    plt.close(fig)

    return written


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    fonts = args.font or list(DEFAULT_FONTS.items())
    try:
        written = run(args.out_dir, fonts, args.line_cm, args.height, args.dpi, args.size)
    except (InvalidArgument, LookupError) as e:
        logger.error("%s", e)
        return 2
    for path in written:
        print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
