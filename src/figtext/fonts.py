"""Font catalog lookup and a per-session registry of font aliases

The catalog is everything matplotlib's font manager knows about plus the
font files found in FIGTEXT_FONT_PATH. Registering a font binds a local
alias to it; style directives then refer to the alias:

    fonts = FontRegistry()
    fonts.add("DejaVu Serif", "Body")
    theme(fig, text=element_text(family="Body", size=12), registry=fonts)

Lookups never fall back to matplotlib's default font: a name that does not
resolve raises `FontNotFound`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from matplotlib import font_manager

from . import config
from .errors import FontNotFound, InvalidArgument

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class FontBinding:
    source_name: str
    alias: str
    path: Path
    family: str


def _entry(path: Path):
    return font_manager.ttfFontProperty(font_manager.get_font(path))


def _extra_entries(dirs):
    entries = []
    for d in dirs:
        d = Path(d)
        if not d.is_dir():
            logger.warning("Font directory %s does not exist", d)
            continue
        for fname in font_manager.findSystemFonts(fontpaths=[str(d)]):
            try:
                entries.append(_entry(Path(fname)))
            except (OSError, RuntimeError) as e:
                logger.warning("Skipping unreadable font %s: %s", fname, e)
    return entries


def catalog(extra_dirs=None) -> dict[str, list[Path]]:
    """Map family name -> font files, over matplotlib's fonts and `extra_dirs`

    `extra_dirs` defaults to FIGTEXT_FONT_PATH.
    """
    if extra_dirs is None:
        extra_dirs = config.font_dirs()
    out: dict[str, list[Path]] = {}
    for e in [*font_manager.fontManager.ttflist, *_extra_entries(extra_dirs)]:
        files = out.setdefault(e.name, [])
        p = Path(e.fname)
        if p not in files:
            files.append(p)
    return out


def _regularity(entry):
    # Lower is more regular: upright first, then weight closest to 400
    weight = entry.weight
    if isinstance(weight, str):
        weight = font_manager.weight_dict.get(weight, 400)
    return (entry.style != "normal", abs(int(weight) - 400), entry.stretch != "normal")


def find_font(source_name: str, extra_dirs=None) -> Path:
    """Return the most regular font file of family `source_name`

    Family names compare case-insensitively.
    """
    if extra_dirs is None:
        extra_dirs = config.font_dirs()
    wanted = source_name.strip().casefold()
    matches = [
        e
        for e in [*font_manager.fontManager.ttflist, *_extra_entries(extra_dirs)]
        if e.name.casefold() == wanted
    ]
    if not matches:
        raise FontNotFound(f"Font {source_name!r} is not in the font catalog")
    return Path(min(matches, key=_regularity).fname)


class FontRegistry(Mapping):
    """Alias -> FontBinding for one plotting session

    Aliases are unique and cannot be rebound or removed.
    """

    def __init__(self, extra_dirs=None):
        self._extra_dirs = extra_dirs
        self._bindings: dict[str, FontBinding] = {}

    def __getitem__(self, alias):
        try:
            return self._bindings[alias]
        except KeyError:
            raise FontNotFound(f"No font registered under alias {alias!r}") from None

    def __contains__(self, alias):
        return alias in self._bindings

    def get(self, alias, default=None):
        return self._bindings.get(alias, default)

    def __iter__(self):
        return iter(self._bindings)

    def __len__(self):
        return len(self._bindings)

    def __repr__(self):
        return f"FontRegistry({list(self._bindings)!r})"

    @property
    def bindings(self) -> Mapping[str, FontBinding]:
        return MappingProxyType(self._bindings)

    def _check_alias(self, alias):
        if not isinstance(alias, str) or not alias.strip():
            raise InvalidArgument(f"Font alias must be a non-empty string, got {alias!r}")
        if alias in self._bindings:
            raise InvalidArgument(
                f"Font alias {alias!r} is already bound to "
                f"{self._bindings[alias].source_name!r}"
            )

    def _bind(self, source_name, alias, path):
        path = Path(path)
        known = {Path(e.fname) for e in font_manager.fontManager.ttflist}
        if path not in known:
            font_manager.fontManager.addfont(path)
        family = _entry(path).name
        binding = FontBinding(source_name=source_name, alias=alias, path=path, family=family)
        self._bindings[alias] = binding
        logger.debug("Registered font %r as %r (%s)", source_name, alias, path)
        return binding

    def add(self, source_name: str, alias: str) -> FontBinding:
        """Register catalog font `source_name` under `alias`"""
        self._check_alias(alias)
        path = find_font(source_name, self._extra_dirs)
        return self._bind(source_name, alias, path)

    def add_file(self, path, alias: str) -> FontBinding:
        """Register a font file directly, bypassing the catalog"""
        self._check_alias(alias)
        path = Path(path).expanduser()
        if not path.is_file():
            raise FontNotFound(f"Font file {path} does not exist")
        return self._bind(path.stem, alias, path)

    def resolve(self, name: str) -> str:
        """Family name matplotlib should use for alias or family `name`

        Generic families ("serif", "cursive", ...) must also map to an
        installed font.
        """
        if name in self._bindings:
            return self._bindings[name].family
        try:
            font_manager.findfont(
                font_manager.FontProperties(family=name), fallback_to_default=False
            )
        except ValueError:
            raise FontNotFound(
                f"{name!r} is neither a registered alias nor a font known to matplotlib"
            ) from None
        return name


_DEFAULT = FontRegistry()


def default_registry() -> FontRegistry:
    return _DEFAULT


def font_add(source_name: str, alias: str) -> FontBinding:
    """Register `source_name` as `alias` in the default registry"""
    return _DEFAULT.add(source_name, alias)
