"""Export figures at a fixed physical size and resolution

A figure saved as 4 x 3 in at 300 dpi and inserted at 100% has text at the
exact point sizes it was styled with. Rescaling the image in the document
rescales the text too, so size the export to the final layout instead (see
`line_width_spec()`).
"""

import logging
import time
from dataclasses import dataclass
from numbers import Integral
from pathlib import Path

import dill as pickle
import matplotlib as mpl

from . import config
from .errors import InvalidArgument
from .units import Unit, convert, positive, to_inches

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


def _dpi(dpi):
    if isinstance(dpi, bool) or not isinstance(dpi, Integral):
        raise InvalidArgument(f"dpi must be an integer, got {dpi!r}")
    if dpi <= 0:
        raise InvalidArgument(f"dpi must be positive, got {dpi}")
    return int(dpi)


@dataclass(frozen=True)
class ExportSpec:
    width: float
    height: float
    unit: Unit
    dpi: int

    def __post_init__(self):
        # Frozen, so normalized values go through object.__setattr__
        object.__setattr__(self, "width", positive(self.width, "width"))
        object.__setattr__(self, "height", positive(self.height, "height"))
        object.__setattr__(self, "unit", Unit.parse(self.unit))
        object.__setattr__(self, "dpi", _dpi(self.dpi))

    @property
    def figsize(self):
        """(width, height) in inches, as `Figure.set_size_inches()` takes it"""
        return (
            to_inches(self.width, self.unit, self.dpi),
            to_inches(self.height, self.unit, self.dpi),
        )

    @property
    def pixels(self):
        w, h = self.figsize
        return int(round(w * self.dpi)), int(round(h * self.dpi))


def build_export_spec(width, height, dpi=None, unit=Unit.INCH):
    """Validate and package export geometry

    `dpi` defaults to `config.default_dpi()`.
    """
    if dpi is None:
        dpi = config.default_dpi()
    return ExportSpec(width=width, height=height, unit=unit, dpi=dpi)


def line_width_spec(line_cm, height, dpi=None, unit=Unit.INCH):
    """Spec whose width spans a document text line of `line_cm` centimeters

    The height is free and given in `unit`.
    """
    if dpi is None:
        dpi = config.default_dpi()
    height_in = to_inches(height, unit, dpi)
    return build_export_spec(convert(line_cm), height_in, dpi, Unit.INCH)


def _format(fig, path):
    ext = path.suffix.lstrip(".").lower()
    supported = fig.canvas.get_supported_filetypes()
    if ext not in supported:
        raise InvalidArgument(
            f"Cannot infer an export format from {path.name!r} "
            f"(supported: {', '.join(sorted(supported))})"
        )
    return ext


def save(fig, path, spec, **kwargs):
    """Save `fig` to `path` at the size and resolution given by `spec`

    The format follows the file extension. Extra keyword arguments go to
    `Figure.savefig()`; `dpi` and `format` are owned by this function.
    """
    if not isinstance(spec, ExportSpec):
        raise InvalidArgument(f"Expected an ExportSpec, got {type(spec).__name__}")
    path = Path(path).expanduser()
    owned = sorted({"dpi", "format"} & set(kwargs))
    if owned:
        raise InvalidArgument(f"save() sets {', '.join(owned)} from the spec and the file name")
    fmt = _format(fig, path)

    fig.set_size_inches(*spec.figsize)
    fig.savefig(path, dpi=spec.dpi, format=fmt, **kwargs)
    logger.debug(
        "Saved %s (%.3f x %.3f in @ %d dpi)", path, *spec.figsize, spec.dpi
    )
    return path


def _ts_stem():
    t = time.time()
    s = time.strftime("%Y%m%d%H%M%S", time.localtime(t))
    ms = int((t - int(t)) * 1000)
    return f"{s}{ms:03d}"


def _any_exists(figdir, stem, exts):
    for ext in (*exts, "pkl"):
        if (figdir / ext / f"{stem}.{ext}").exists():
            return True
    return False


def _uniq_stem(figdir, base, exts):
    stem = base
    n = 1
    while _any_exists(figdir, stem, exts):
        stem = f"{base}-{n:02d}"
        n += 1
    return stem


def retain(fig, stem=None, spec=None, *, formats=("pdf", "png", "svg"), keep_pickle=True):
    """
    Save to FIGTEXT_FIGURES_PATH with identical stem across `formats` (+ .pkl).
    - All formats share the physical size of `spec` (default 4 x 3 in).
    - svg: keep text as text (svg.fonttype='none') so fonts stay editable.
    - An existing stem is never overwritten; a -NN suffix is added instead.
    """
    if spec is None:
        spec = build_export_spec(4, 3)
    figdir = config.figures_path()
    base = _uniq_stem(figdir, stem or _ts_stem(), formats)
    out = {}

    for ext in formats:
        (figdir / ext).mkdir(parents=True, exist_ok=True)
        path = figdir / ext / f"{base}.{ext}"
        if ext == "svg":
            with mpl.rc_context({"svg.fonttype": "none"}):
                save(fig, path, spec)
        else:
            save(fig, path, spec)
        out[ext] = str(path)

    if keep_pickle:
        (figdir / "pkl").mkdir(parents=True, exist_ok=True)
        pkl = figdir / "pkl" / f"{base}.pkl"
        with pkl.open("wb") as f:
            pickle.dump(fig, f)
        out["pickle"] = str(pkl)

    logger.info("Retained figure %r as %s", base, ", ".join(out))
    return out


def reopen(stem_or_path):
    p = Path(stem_or_path)
    if p.suffix != ".pkl":
        p = config.figures_path() / "pkl" / (p.name + ".pkl")
    with p.open("rb") as f:
        fig = pickle.load(f)
    return fig
