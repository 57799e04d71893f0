import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from figtext.fonts import FontRegistry


@pytest.fixture(autouse=True)
def _isolated(monkeypatch):
    for var in ("FIGTEXT_FIGURES_PATH", "FIGTEXT_FONT_PATH", "FIGTEXT_DPI"):
        monkeypatch.delenv(var, raising=False)
    # Restores rcParams changed by use_style() and rc updates
    with matplotlib.rc_context():
        yield
    plt.close("all")


@pytest.fixture()
def registry():
    """Fonts bundled with matplotlib, so these always resolve"""
    reg = FontRegistry(extra_dirs=[])
    reg.add("DejaVu Sans", "Sans")
    reg.add("DejaVu Serif", "Serif")
    reg.add("DejaVu Sans Mono", "Mono")
    return reg
