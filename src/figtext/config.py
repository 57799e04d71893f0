"""Runtime configuration from environment variables

FIGTEXT_FIGURES_PATH  where `export.retain()` writes figures (default: cwd)
FIGTEXT_FONT_PATH     extra font directories, separated by os.pathsep
FIGTEXT_DPI           default export resolution (default: 300)
"""

import os
from pathlib import Path

from .errors import InvalidArgument

DEFAULT_DPI = 300


def figures_path():
    return Path(os.environ.get("FIGTEXT_FIGURES_PATH", ".")).expanduser().resolve()


def font_dirs():
    raw = os.environ.get("FIGTEXT_FONT_PATH", "")
    return [Path(p).expanduser() for p in raw.split(os.pathsep) if p.strip()]


def default_dpi():
    raw = os.environ.get("FIGTEXT_DPI")
    if raw is None or not raw.strip():
        return DEFAULT_DPI
    try:
        dpi = int(raw)
    except ValueError:
        raise InvalidArgument(f"FIGTEXT_DPI must be an integer, got {raw!r}")
    if dpi <= 0:
        raise InvalidArgument(f"FIGTEXT_DPI must be positive, got {dpi}")
    return dpi
