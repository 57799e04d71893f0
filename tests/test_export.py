import dataclasses

import matplotlib.image as mpimg
import matplotlib.pyplot as plt
import pytest
from matplotlib.figure import Figure

from figtext.errors import InvalidArgument
from figtext.export import ExportSpec, build_export_spec, line_width_spec, reopen, retain, save
from figtext.units import Unit


@pytest.fixture()
def fig():
    fig, ax = plt.subplots()
    ax.plot([1, 2, 3], [1, 4, 9])
    ax.set_title("squares")
    return fig


def test_build_export_spec():
    spec = build_export_spec(4, 3, 300)
    assert spec == ExportSpec(width=4.0, height=3.0, unit=Unit.INCH, dpi=300)
    assert spec.unit == "in"
    assert spec.figsize == (4.0, 3.0)
    assert spec.pixels == (1200, 900)


@pytest.mark.parametrize(
    "args",
    [(0, 3, 300), (4, 0, 300), (4, 3, 0), (-4, 3, 300), (4, float("nan"), 300), (4, 3, 300.5), (4, 3, True)],
)
def test_build_export_spec_rejects(args):
    with pytest.raises(InvalidArgument):
        build_export_spec(*args)


def test_build_export_spec_unit():
    spec = build_export_spec(10, 7.5, 254, "cm")
    assert spec.unit is Unit.CENTIMETER
    assert spec.figsize == pytest.approx((10 / 2.54, 7.5 / 2.54))
    assert spec.pixels == (1000, 750)
    with pytest.raises(InvalidArgument):
        build_export_spec(4, 3, 300, "pt")


def test_pixel_spec():
    spec = build_export_spec(800, 600, 200, Unit.PIXEL)
    assert spec.figsize == (4.0, 3.0)
    assert spec.pixels == (800, 600)


def test_default_dpi_from_env(monkeypatch):
    monkeypatch.setenv("FIGTEXT_DPI", "150")
    assert build_export_spec(4, 3).dpi == 150


def test_spec_is_frozen():
    spec = build_export_spec(4, 3, 300)
    with pytest.raises(dataclasses.FrozenInstanceError):
        spec.width = 5


def test_line_width_spec():
    spec = line_width_spec(16, 3, 300)
    assert spec.width == pytest.approx(6.2992, abs=1e-4)
    assert spec.height == 3
    assert spec.unit is Unit.INCH
    assert line_width_spec(16, 7.62, 300, "cm").height == pytest.approx(3)
    with pytest.raises(InvalidArgument):
        line_width_spec(0, 3, 300)


def test_save_png_size(fig, tmp_path):
    out = save(fig, tmp_path / "plot.png", build_export_spec(4, 3, 50))
    assert out == tmp_path / "plot.png"
    img = mpimg.imread(out)
    assert img.shape[:2] == (150, 200)
    assert tuple(fig.get_size_inches()) == (4, 3)


@pytest.mark.parametrize("ext", ["pdf", "svg", "jpg"])
def test_save_format_from_extension(fig, tmp_path, ext):
    out = save(fig, tmp_path / f"plot.{ext}", build_export_spec(4, 3, 50))
    assert out.stat().st_size > 0


def test_save_unknown_extension(fig, tmp_path):
    with pytest.raises(InvalidArgument, match="export format"):
        save(fig, tmp_path / "plot.xyz", build_export_spec(4, 3, 50))
    assert not (tmp_path / "plot.xyz").exists()


def test_save_requires_spec(fig, tmp_path):
    with pytest.raises(InvalidArgument):
        save(fig, tmp_path / "plot.png", (4, 3, 300))


def test_save_unwritable(fig, tmp_path):
    with pytest.raises(OSError):
        save(fig, tmp_path / "missing" / "plot.png", build_export_spec(4, 3, 50))


def test_retain(fig, tmp_path, monkeypatch):
    monkeypatch.setenv("FIGTEXT_FIGURES_PATH", str(tmp_path))
    spec = build_export_spec(4, 3, 50)

    out = retain(fig, "demo", spec, formats=("png", "svg"))
    assert set(out) == {"png", "svg", "pickle"}
    assert out["png"] == str(tmp_path / "png" / "demo.png")
    # Text stays editable in the SVG
    assert "<text" in (tmp_path / "svg" / "demo.svg").read_text()

    again = retain(fig, "demo", spec, formats=("png",), keep_pickle=False)
    assert again == {"png": str(tmp_path / "png" / "demo-01.png")}


def test_reopen(fig, tmp_path, monkeypatch):
    monkeypatch.setenv("FIGTEXT_FIGURES_PATH", str(tmp_path))
    out = retain(fig, "again", build_export_spec(4, 3, 50), formats=("png",))

    for ref in ("again", out["pickle"]):
        g = reopen(ref)
        assert isinstance(g, Figure)
        assert g.axes[0].get_title() == "squares"


@pytest.mark.parametrize(
    "args",
    [(4, 3, Unit.INCH, 0), (4, 3, Unit.INCH, -300), (4, 3, Unit.INCH, 2.5), (0, 3, Unit.INCH, 300), (4, 3, "pt", 300)],
)
def test_export_spec_validates_itself(args):
    with pytest.raises(InvalidArgument):
        ExportSpec(*args)


def test_export_spec_normalizes():
    spec = ExportSpec(4, 3, "cm", 300)
    assert spec.unit is Unit.CENTIMETER
    assert isinstance(spec.width, float)


@pytest.mark.parametrize("key", ["dpi", "format"])
def test_save_owns_dpi_and_format(fig, tmp_path, key):
    with pytest.raises(InvalidArgument, match=key):
        save(fig, tmp_path / "plot.png", build_export_spec(4, 3, 50), **{key: "png" if key == "format" else 72})
    assert not (tmp_path / "plot.png").exists()


def test_save_passes_other_kwargs(fig, tmp_path):
    out = save(fig, tmp_path / "plot.png", build_export_spec(4, 3, 50), facecolor="yellow")
    assert mpimg.imread(out).shape[:2] == (150, 200)


def test_reopen_dotted_stem(fig, tmp_path, monkeypatch):
    monkeypatch.setenv("FIGTEXT_FIGURES_PATH", str(tmp_path))
    retain(fig, "fig", build_export_spec(4, 3, 50), formats=("png",))
    fig.axes[0].set_title("second version")
    retain(fig, "fig.v2", build_export_spec(4, 3, 50), formats=("png",))

    assert reopen("fig.v2").axes[0].get_title() == "second version"
    assert reopen("fig").axes[0].get_title() == "squares"
