"""Pillow-generated call-type icons.

All arrows start from a single white call arrow pointing down and left;
rotation and a multiply tint turn it into the incoming, outgoing and
missed variants. Everything is generated at runtime so no image files
need to be shipped with the package.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass

from PIL import Image, ImageChops, ImageColor, ImageDraw, ImageFont

from .call_types import IconCategory
from .config import DEFAULT_CONFIG, load_config

log = logging.getLogger(__name__)

WHITE = (255, 255, 255, 255)
# Source camera glyph, scaled to the arrow height on use
CAMERA_SIZE = (28, 20)

_COLORS = DEFAULT_CONFIG["colors"]


def _rgb(value: str) -> tuple[int, int, int]:
    return ImageColor.getrgb(value)[:3]


def _int_setting(cfg: dict, key: str) -> int:
    value = cfg.get(key, DEFAULT_CONFIG[key])
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{key} must be an integer, got {value!r}") from None


@dataclass(frozen=True)
class IconStyle:
    """Styling context the icons are built from. Hashable, so it can key a cache."""

    icon_size: int = DEFAULT_CONFIG["icon_size"]
    icon_margin: int = DEFAULT_CONFIG["icon_margin"]
    incoming: tuple[int, int, int] = _rgb(_COLORS["incoming"])
    outgoing: tuple[int, int, int] = _rgb(_COLORS["outgoing"])
    missed: tuple[int, int, int] = _rgb(_COLORS["missed"])
    voicemail: tuple[int, int, int] = _rgb(_COLORS["voicemail"])
    secondary: tuple[int, int, int] = _rgb(_COLORS["secondary"])
    carrier_variant: bool = False

    def __post_init__(self) -> None:
        if self.icon_size < 1:
            raise ValueError(f"icon_size must be at least 1, got {self.icon_size}")
        if self.icon_margin < 0:
            raise ValueError(f"icon_margin must not be negative, got {self.icon_margin}")

    @classmethod
    def from_config(cls, cfg: dict) -> IconStyle:
        colors = cfg.get("colors") or {}
        if not isinstance(colors, dict):
            raise ValueError(f"colors must be a mapping, got {colors!r}")
        return cls(
            icon_size=_int_setting(cfg, "icon_size"),
            icon_margin=_int_setting(cfg, "icon_margin"),
            incoming=_rgb(colors.get("incoming", _COLORS["incoming"])),
            outgoing=_rgb(colors.get("outgoing", _COLORS["outgoing"])),
            missed=_rgb(colors.get("missed", _COLORS["missed"])),
            voicemail=_rgb(colors.get("voicemail", _COLORS["voicemail"])),
            secondary=_rgb(colors.get("secondary", _COLORS["secondary"])),
            carrier_variant=bool(cfg.get("carrier_variant", False)),
        )


def _blank(width: int, height: int) -> Image.Image:
    return Image.new("RGBA", (width, height), (0, 0, 0, 0))


def _tint(img: Image.Image, color: tuple[int, int, int]) -> Image.Image:
    # Multiply keeps the alpha channel since the overlay is fully opaque
    return ImageChops.multiply(img, Image.new("RGBA", img.size, color + (255,)))


def _call_arrow(size: int) -> Image.Image:
    img = _blank(size, size)
    draw = ImageDraw.Draw(img)
    stroke = max(1, size // 8)
    draw.line([(size - 2, 1), (2, size - 3)], fill=WHITE, width=stroke)
    draw.polygon([(1, size - 1), (1, size // 2), (size // 2, size - 1)], fill=WHITE)
    return img


def _voicemail(size: int) -> Image.Image:
    img = _blank(size, size)
    draw = ImageDraw.Draw(img)
    r = size // 4
    cy = size // 2
    draw.ellipse([0, cy - r, 2 * r, cy + r], outline=WHITE, width=max(1, size // 10))
    draw.ellipse([size - 1 - 2 * r, cy - r, size - 1, cy + r], outline=WHITE, width=max(1, size // 10))
    draw.line([(r, cy + r), (size - 1 - r, cy + r)], fill=WHITE, width=max(1, size // 10))
    return img


def _camera() -> Image.Image:
    w, h = CAMERA_SIZE
    img = _blank(w, h)
    draw = ImageDraw.Draw(img)
    draw.rectangle([1, 3, 19, h - 4], fill=WHITE)
    draw.polygon([(19, h // 2), (w - 1, 3), (w - 1, h - 4)], fill=WHITE)
    return img


def _wifi(size: int) -> Image.Image:
    img = _blank(size, size)
    draw = ImageDraw.Draw(img)
    draw.pieslice([0, 0, size - 1, 2 * (size - 1)], 225, 315, fill=WHITE)
    return img


def _badge(label: str, width: int, height: int) -> Image.Image:
    img = _blank(width, height)
    draw = ImageDraw.Draw(img)
    draw.rounded_rectangle([0, 0, width - 1, height - 1], radius=max(1, height // 4), outline=WHITE)
    font = ImageFont.load_default()
    left, top, right, bottom = draw.textbbox((0, 0), label, font=font)
    draw.text(
        ((width - (right - left)) / 2 - left, (height - (bottom - top)) / 2 - top),
        label,
        fill=WHITE,
        font=font,
    )
    return img


def _scaled_to_height(img: Image.Image, height: int) -> Image.Image:
    """Scale to the given height, keeping the aspect ratio."""
    width = int(img.width * (height / img.height))
    return img.resize((width, height), Image.Resampling.NEAREST)


@dataclass(frozen=True)
class IconResources:
    """Pre-tinted icon images plus the gap between icons.

    Shared read-only across every strip; the images must not be drawn on.
    """

    incoming: Image.Image
    outgoing: Image.Image
    missed: Image.Image
    voicemail: Image.Image
    video: Image.Image
    wifi: Image.Image
    ims: Image.Image
    icon_margin: int
    carrier_variant: bool = False

    @classmethod
    def build(cls, style: IconStyle) -> IconResources:
        size = style.icon_size
        arrow = _call_arrow(size)
        missed = _tint(arrow, style.missed)

        if style.carrier_variant:
            video = _badge("VT", size * 3 // 2, size)
        else:
            # Same height as the call arrows
            video = _scaled_to_height(_camera(), missed.height)

        log.info(
            "Built call type icons (size=%d, margin=%d, carrier_variant=%s)",
            size, style.icon_margin, style.carrier_variant,
        )
        return cls(
            incoming=_tint(arrow, style.incoming),
            outgoing=_tint(arrow.rotate(180), style.outgoing),
            missed=missed,
            voicemail=_tint(_voicemail(size), style.voicemail),
            video=_tint(video, style.secondary),
            wifi=_tint(_wifi(size), style.secondary),
            ims=_tint(_badge("HD", size * 3 // 2, size), style.secondary),
            icon_margin=style.icon_margin,
            carrier_variant=style.carrier_variant,
        )

    def image_for(self, category: IconCategory) -> Image.Image:
        return getattr(self, category.value)


@functools.lru_cache(maxsize=None)
def _cached_resources(style: IconStyle) -> IconResources:
    return IconResources.build(style)


def shared_resources(style: IconStyle | None = None) -> IconResources:
    """Return the bundle for a style, building it on first use."""
    return _cached_resources(style or IconStyle())


def resources_from_config(cfg: dict | None = None) -> IconResources:
    """Return the shared bundle for a config dict, loading the config file if none is given."""
    if cfg is None:
        cfg = load_config()
    return shared_resources(IconStyle.from_config(cfg))
