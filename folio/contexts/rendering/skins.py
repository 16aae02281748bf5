"""
Skin configuration and page decoration.

Skins are loaded from skins.yaml with OmegaConf: each entry under `skins` is
merged over `defaults` and frozen into a Skin. A skin never changes how lines
are classified; it supplies colors, margins, spacing and the page chrome that
make_decoration_hook() redraws on every page.

Examples:
    >>> skin = get_skin("corner_accent")
    >>> hook = make_decoration_hook(skin, backend)
    >>> hook(backend.create_page(595, 842), 595, 842)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from dotenv import load_dotenv
from omegaconf import OmegaConf

from folio.contexts.layout.classifier import ClassifierConfig, SkillsPolicy
from folio.contexts.layout.metrics import LayoutMetrics
from folio.contexts.layout.types import Color
from folio.contexts.rendering.backend import Line, MetricsProvider, Page, Rect
from folio.contexts.rendering.exceptions import SkinConfigError, UnknownSkinError

load_dotenv()
DEFAULT_SKINS_PATH = Path(__file__).parent / "skins.yaml"
SKINS_PATH = Path(os.getenv("FOLIO_SKINS_PATH", str(DEFAULT_SKINS_PATH)))

DEFAULT_SKIN = "accent_bar"

HEADER_ALIGNMENTS = ("center", "left", "right")
DIVIDERS = ("none", "single", "double")
HEADING_STYLES = ("plain", "underline", "double_underline", "band", "marker")
DECORATION_SHAPES = ("top_bar", "left_bar", "corners", "frame", "bottom_rule")

DecorationHook = Callable[[Page, float, float], None]


@dataclass(frozen=True)
class Palette:
    accent: Color
    text: Color
    muted: Color
    heading: Color
    name: Color
    contact: Color


@dataclass(frozen=True)
class Margins:
    left: float
    right: float
    bottom: float
    content_top: float


@dataclass(frozen=True)
class Typography:
    name_size: float
    headline_size: float
    contact_size: float
    section_size: float
    body_size: float
    body_line_factor: float
    section_line_factor: float
    title_size_delta: float

    @property
    def body_line_height(self) -> float:
        return self.body_size * self.body_line_factor

    @property
    def section_line_height(self) -> float:
        return self.section_size * self.section_line_factor

    @property
    def title_size(self) -> float:
        return self.body_size + self.title_size_delta


@dataclass(frozen=True)
class Spacing:
    """
    Vertical gaps and horizontal insets used while laying out the body.

    Attributes:
        blank_gap: Advance for a blank line
        section_gap: Space above a section heading
        heading_gap: Extra space under each heading line
        job_gap: Space between consecutive job entries (not before the first)
        title_gap: Extra space under each job title line
        entry_gap: Space under a job entry's organization line
        skills_gap: Extra space under a skills category
        text_indent: Body text offset from the left margin
        heading_inset: Width kept free to the right of headings when wrapping
    """

    blank_gap: float
    section_gap: float
    heading_gap: float
    job_gap: float
    title_gap: float
    entry_gap: float
    skills_gap: float
    text_indent: float
    heading_inset: float


@dataclass(frozen=True)
class HeaderStyle:
    align: str
    top: float
    show_headline: bool
    band_height: float
    band_color: Color
    name_color: Color
    contact_color: Color
    divider: str
    after_gap: float
    body_top: Optional[float]


@dataclass(frozen=True)
class Decoration:
    """One piece of repeating page chrome (see skins.yaml for shapes)."""

    shape: str
    color: Color
    size: float = 0.0
    thickness: float = 1.0


@dataclass(frozen=True)
class Skin:
    """Immutable visual policy for one rendered resume."""

    key: str
    label: str
    description: str
    skills_policy: SkillsPolicy
    palette: Palette
    margins: Margins
    typography: Typography
    spacing: Spacing
    header: HeaderStyle
    heading_style: str
    decorations: Tuple[Decoration, ...]

    def content_width(self, page_width: float) -> float:
        return page_width - self.margins.left - self.margins.right

    def classifier_config(self) -> ClassifierConfig:
        return ClassifierConfig(skills_policy=self.skills_policy)

    def layout_metrics(self) -> LayoutMetrics:
        """Body layout parameters for this skin."""
        typography, spacing = self.typography, self.spacing
        return LayoutMetrics(
            left_margin=self.margins.left,
            right_margin=self.margins.right,
            bottom_margin=self.margins.bottom,
            content_top=self.margins.content_top,
            body_size=typography.body_size,
            title_size=typography.title_size,
            section_size=typography.section_size,
            body_line_height=typography.body_line_height,
            section_line_height=typography.section_line_height,
            blank_gap=spacing.blank_gap,
            section_gap=spacing.section_gap,
            heading_gap=spacing.heading_gap,
            job_gap=spacing.job_gap,
            title_gap=spacing.title_gap,
            entry_gap=spacing.entry_gap,
            skills_gap=spacing.skills_gap,
            text_indent=spacing.text_indent,
            heading_inset=spacing.heading_inset,
            text_color=self.palette.text,
            muted_color=self.palette.muted,
            heading_color=self.palette.heading,
            accent_color=self.palette.accent,
            heading_style=self.heading_style,
            classifier=self.classifier_config(),
        )


def _color(value: Any) -> Color:
    r, g, b = (float(component) for component in value)
    return (r, g, b)


def _decoration(entry: Dict[str, Any]) -> Decoration:
    shape = entry["shape"]
    if shape not in DECORATION_SHAPES:
        raise ValueError(f"unknown decoration shape '{shape}', expected one of {DECORATION_SHAPES}")
    size = entry.get("height", entry.get("width", entry.get("size", entry.get("inset", 0.0))))
    return Decoration(
        shape=shape,
        color=_color(entry["color"]),
        size=float(size),
        thickness=float(entry.get("thickness", 1.0)),
    )


def _check_choice(value: str, choices: Tuple[str, ...], field_name: str) -> str:
    if value not in choices:
        raise ValueError(f"{field_name} must be one of {choices}, got '{value}'")
    return value


def build_skin(key: str, data: Dict[str, Any]) -> Skin:
    """
    Build a Skin from a resolved (defaults-merged) config dict.

    Raises:
        KeyError, TypeError, ValueError: On missing or malformed fields
    """
    palette = data["palette"]
    header = data["header"]
    body_top = header.get("body_top")

    return Skin(
        key=key,
        label=data["label"],
        description=data.get("description", ""),
        skills_policy=SkillsPolicy(data["skills_policy"]),
        palette=Palette(**{name: _color(value) for name, value in palette.items()}),
        margins=Margins(**{name: float(value) for name, value in data["margins"].items()}),
        typography=Typography(**{name: float(value) for name, value in data["typography"].items()}),
        spacing=Spacing(**{name: float(value) for name, value in data["spacing"].items()}),
        header=HeaderStyle(
            align=_check_choice(header["align"], HEADER_ALIGNMENTS, "header.align"),
            top=float(header["top"]),
            show_headline=bool(header["show_headline"]),
            band_height=float(header["band_height"]),
            band_color=_color(header["band_color"]),
            name_color=_color(header["name_color"]),
            contact_color=_color(header["contact_color"]),
            divider=_check_choice(header["divider"], DIVIDERS, "header.divider"),
            after_gap=float(header["after_gap"]),
            body_top=float(body_top) if body_top is not None else None,
        ),
        heading_style=_check_choice(data["heading_style"], HEADING_STYLES, "heading_style"),
        decorations=tuple(_decoration(entry) for entry in data["decorations"]),
    )


def load_skins(config_path: Optional[Path] = None) -> Dict[str, Skin]:
    """
    Load every skin from a skins YAML file.

    Each entry under `skins` is merged over `defaults` (later wins), then
    interpolations such as ${palette.accent} are resolved per skin.

    Args:
        config_path: Skins file (default: FOLIO_SKINS_PATH env or bundled skins.yaml)

    Returns:
        Dict of skin key to Skin, in file order

    Raises:
        SkinConfigError: If the file lacks `defaults`/`skins` or a skin is malformed
    """
    config_path = Path(config_path) if config_path is not None else SKINS_PATH
    raw = OmegaConf.load(config_path)

    if "defaults" not in raw or "skins" not in raw:
        raise SkinConfigError("Skins config must define 'defaults' and 'skins'", config_path)

    skins = {}
    for key in raw.skins:
        merged = OmegaConf.merge(raw.defaults, raw.skins[key])
        try:
            data = OmegaConf.to_container(merged, resolve=True)
            skins[key] = build_skin(key, data)
        except (KeyError, TypeError, ValueError) as e:
            raise SkinConfigError(f"Invalid skin definition: {e}", config_path, key) from e

    return skins


def get_skin(skin_key: str, config_path: Optional[Path] = None) -> Skin:
    """
    Look up one skin by key.

    Raises:
        UnknownSkinError: If skin_key isn't defined
    """
    skins = load_skins(config_path)
    if skin_key not in skins:
        raise UnknownSkinError(skin_key, skins.keys())
    return skins[skin_key]


def list_skins(config_path: Optional[Path] = None) -> List[Tuple[str, str]]:
    """(key, label) pairs for every skin, in file order."""
    return [(key, skin.label) for key, skin in load_skins(config_path).items()]


def _decoration_shapes(
    decoration: Decoration, width: float, height: float, bottom_margin: float
) -> List[Any]:
    """Geometry for one decoration on a width x height page."""
    size = decoration.size
    if decoration.shape == "top_bar":
        return [Rect(0, height - size, width, size)]
    if decoration.shape == "left_bar":
        return [Rect(0, 0, size, height)]
    if decoration.shape == "corners":
        return [Rect(0, height - size, size, size), Rect(width - size, height - size, size, size)]
    if decoration.shape == "frame":
        return [
            Rect(size, size, width - 2 * size, height - 2 * size, fill=False, thickness=decoration.thickness)
        ]
    # bottom_rule sits halfway into the bottom margin so it never crosses text
    y = bottom_margin / 2
    return [Line((size, y), (width - size, y), thickness=decoration.thickness)]


def make_decoration_hook(skin: Skin, backend: MetricsProvider) -> DecorationHook:
    """
    Page chrome callback for a skin.

    The returned hook draws the skin's decorations on a page and is called once
    for every page created, including the first.
    """

    def decorate(page: Page, width: float, height: float) -> None:
        for decoration in skin.decorations:
            for shape in _decoration_shapes(decoration, width, height, skin.margins.bottom):
                backend.draw_shape(page, shape, decoration.color)

    return decorate
