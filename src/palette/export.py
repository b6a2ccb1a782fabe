from __future__ import annotations

"""Palette exporters: JSON, PNG swatches and a single-page PDF.

Swatches are rendered headless with Matplotlib's object-oriented API
(``matplotlib.figure.Figure`` + Agg canvas) so no GUI backend or pyplot
global state is involved.

Every exporter is a no-op returning ``None`` when the palette is missing or
empty; otherwise it returns the written :class:`pathlib.Path`. When no path
is given, files go to ``data/export/`` under the project root.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Tuple

import numpy as np
from matplotlib import patheffects
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from common import settings
from util.paths import ensure_export_dir, unique_path

from .palette import Palette

logger = logging.getLogger(__name__)

# A4 portrait in inches (210 x 297 mm)
A4_SIZE_IN = (210.0 / 25.4, 297.0 / 25.4)

SWATCH_WIDTH_IN = 1.2
SWATCH_HEIGHT_IN = 6.0


def _resolve_path(path: Path | str | None, default_name: str) -> Path:
    if path is None:
        out = ensure_export_dir() / default_name
    else:
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
    if not settings.get().EXPORT_OVERWRITE:
        out = unique_path(out)
    return out


def palette_to_json(palette: Palette) -> str:
    """Serialize palette labels as a JSON array indented by 2 spaces."""
    return json.dumps(list(palette.labels), indent=2)


def export_json(palette: Optional[Palette], path: Path | str | None = None) -> Path | None:
    """Write the ordered color labels to ``palette.json`` (or ``path``)."""
    if palette is None or len(palette) == 0:
        logger.debug("export_json skipped: empty palette")
        return None
    out = _resolve_path(path, "palette.json")
    out.write_text(palette_to_json(palette), encoding="utf-8")
    logger.info("exported %d colors to %s", len(palette), out)
    return out


def swatch_pixels(palette: Palette) -> np.ndarray:
    """Return a ``(1, n, 3)`` uint8 image with one pixel per palette color."""
    return np.array([[c.rgb for c in palette.colors]], dtype=np.uint8)


def render_swatches(palette: Palette, *, dpi: int | None = None) -> Figure:
    """Render the palette as equal-width vertical swatches, darkest first.

    Each swatch carries its formatted label in white bold text with a dark
    outline, rotated to run along the swatch.
    """
    if len(palette) == 0:
        raise ValueError("cannot render an empty palette")
    n = len(palette)
    dpi = dpi if dpi is not None else settings.get().EXPORT_DPI

    fig = Figure(figsize=(SWATCH_WIDTH_IN * n, SWATCH_HEIGHT_IN), dpi=dpi)
    FigureCanvasAgg(fig)
    ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
    ax.imshow(
        swatch_pixels(palette),
        aspect="auto",
        interpolation="nearest",
        extent=(0.0, float(n), 0.0, 1.0),
    )
    ax.set_xlim(0.0, float(n))
    ax.set_ylim(0.0, 1.0)
    ax.set_axis_off()

    outline = [patheffects.withStroke(linewidth=3, foreground="black")]
    for i, label in enumerate(palette.labels):
        ax.text(
            i + 0.5,
            0.5,
            label.upper(),
            rotation=90,
            ha="center",
            va="center",
            color="white",
            fontsize=14,
            fontweight="bold",
            path_effects=outline,
        )
    return fig


def _rasterize(fig: Figure) -> np.ndarray:
    canvas = FigureCanvasAgg(fig)
    canvas.draw()
    return np.asarray(canvas.buffer_rgba()).copy()


def export_image(
    palette: Optional[Palette],
    path: Path | str | None = None,
    *,
    dpi: int | None = None,
) -> Path | None:
    """Save the rendered swatches as ``palette.png`` (or ``path``)."""
    if palette is None or len(palette) == 0:
        logger.debug("export_image skipped: empty palette")
        return None
    out = _resolve_path(path, "palette.png")
    fig = render_swatches(palette, dpi=dpi)
    fig.savefig(out, format="png")
    logger.info("exported swatch image to %s", out)
    return out


def _page_placement(img_h: int, img_w: int) -> Tuple[float, float, float, float]:
    """Return ``(left, bottom, width, height)`` page fractions for an image.

    The image fills the page width and sits at the top. When that would be
    taller than the page it is fitted to the page height instead and
    centered horizontally. Either way the aspect ratio is kept.
    """
    page_w, page_h = A4_SIZE_IN
    height = (img_h / img_w) * (page_w / page_h)
    if height <= 1.0:
        return (0.0, 1.0 - height, 1.0, height)
    width = 1.0 / height
    return ((1.0 - width) / 2.0, 0.0, width, 1.0)


def export_pdf(
    palette: Optional[Palette],
    path: Path | str | None = None,
    *,
    scale: int | None = None,
) -> Path | None:
    """Save the swatches on a single A4 portrait page as ``palette.pdf``.

    The swatches are first rasterized at ``scale`` times the export DPI and
    then placed at the top of the page, scaled to the page width. Narrow
    palettes that would overflow the page are fitted to its height instead.
    The aspect ratio is kept in both cases.
    """
    if palette is None or len(palette) == 0:
        logger.debug("export_pdf skipped: empty palette")
        return None
    cfg = settings.get()
    scale = scale if scale is not None else cfg.PDF_SCALE
    out = _resolve_path(path, "palette.pdf")

    pixels = _rasterize(render_swatches(palette, dpi=cfg.EXPORT_DPI * scale))
    img_h, img_w = pixels.shape[:2]

    page = Figure(figsize=A4_SIZE_IN)
    FigureCanvasAgg(page)
    ax = page.add_axes(_page_placement(img_h, img_w))
    ax.imshow(pixels, aspect="auto", interpolation="bilinear")
    ax.set_axis_off()
    page.savefig(out, format="pdf")
    logger.info("exported swatch PDF to %s", out)
    return out


__all__ = [
    "A4_SIZE_IN",
    "palette_to_json",
    "export_json",
    "swatch_pixels",
    "render_swatches",
    "export_image",
    "export_pdf",
]
