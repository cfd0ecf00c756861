"""Horizontal strip of call-type icons for a call-log row.

The strip paints its icons directly instead of holding one child widget
per icon, so a row can be cleared and rebound cheaply when the list
recycles it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, NamedTuple

from PIL import Image

from .call_types import IconCategory, classify, classify_ims
from .icons import IconResources

log = logging.getLogger(__name__)


class IconPlacement(NamedTuple):
    category: IconCategory
    left: int
    top: int
    right: int
    bottom: int


@dataclass(frozen=True)
class StripState:
    entries: tuple[int, ...]
    show_video: bool
    width: int
    height: int


class CallTypeIconsView:
    """Draws one icon per call in a row, then the video and IMS icons.

    Layout: each call's direction icon followed by the icon margin, then
    the video icon when shown, then one trailing IMS badge per IMS call.
    The IMS badges are grouped at the end and no longer line up with the
    call they belong to.

    Video and IMS icons added through add_ims_or_video_icon() or
    set_show_video() contribute their width without a margin, and every
    such call counts again.
    """

    def __init__(
        self,
        resources: IconResources,
        on_invalidate: Callable[[], None] | None = None,
    ) -> None:
        self._resources = resources
        self._on_invalidate = on_invalidate
        self._call_types: list[int] = []
        # Video/IMS sizing contributions, one per call that added one
        self._extras: list[IconCategory] = []
        self._show_video = False
        self._width = 0
        self._height = 0

    @property
    def carrier_variant(self) -> bool:
        return self._resources.carrier_variant

    def _invalidate(self) -> None:
        if self._on_invalidate is not None:
            self._on_invalidate()

    def _relayout(self) -> None:
        res = self._resources
        width = 0
        height = 0
        for call_type in self._call_types:
            img = res.image_for(classify(call_type))
            width += img.width + res.icon_margin
            height = max(height, img.height)
        for category in self._extras:
            img = res.image_for(category)
            width += img.width
            height = max(height, img.height)
        self._width = width
        self._height = height

    def clear(self) -> None:
        """Drop all calls. The video flag is left as is; see reset()."""
        self._call_types.clear()
        self._extras.clear()
        self._relayout()
        self._invalidate()

    def reset(self) -> None:
        """Return to the state of a freshly constructed strip."""
        self._show_video = False
        self.clear()

    def add(self, call_type: int) -> None:
        self._call_types.append(call_type)
        self._relayout()
        self._invalidate()

    def add_ims_or_video_icon(self, call_type: int, show_video: bool) -> None:
        self._show_video = show_video
        if show_video:
            category = IconCategory.VIDEO
        else:
            category = classify_ims(call_type)
            if category is None:
                return
        self._extras.append(category)
        self._relayout()
        self._invalidate()

    def set_show_video(self, show_video: bool) -> None:
        """Determine whether the video call icon will be shown."""
        self._show_video = show_video
        if self.carrier_variant:
            return
        if show_video:
            self._extras.append(IconCategory.VIDEO)
            self._relayout()
            self._invalidate()

    def is_video_shown(self) -> bool:
        return self._show_video

    def entry_count(self) -> int:
        return len(self._call_types)

    def __len__(self) -> int:
        return len(self._call_types)

    def entry_at(self, index: int) -> int:
        if not 0 <= index < len(self._call_types):
            raise IndexError(
                f"call type index {index} out of range for {len(self._call_types)} entries"
            )
        return self._call_types[index]

    @property
    def measured_width(self) -> int:
        return self._width

    @property
    def measured_height(self) -> int:
        return self._height

    @property
    def measured_size(self) -> tuple[int, int]:
        return self._width, self._height

    def state(self) -> StripState:
        return StripState(
            entries=tuple(self._call_types),
            show_video=self._show_video,
            width=self._width,
            height=self._height,
        )

    def draw_list(self) -> list[IconPlacement]:
        """Return where each icon goes, in paint order."""
        res = self._resources
        placements: list[IconPlacement] = []
        left = 0

        def place(category: IconCategory) -> int:
            img = res.image_for(category)
            right = left + img.width
            placements.append(IconPlacement(category, left, 0, right, img.height))
            return right

        for call_type in self._call_types:
            left = place(classify(call_type)) + res.icon_margin

        if self._show_video:
            left = place(IconCategory.VIDEO) + res.icon_margin

        # No margin between IMS badges
        for call_type in self._call_types:
            category = classify_ims(call_type)
            if category is not None:
                left = place(category)

        return placements

    def render(self, surface: Image.Image) -> None:
        """Paint the icons onto a Pillow image, clipped to its bounds.

        RGBA surfaces are composited source-over; other modes get the icon
        pasted through its alpha channel.
        """
        placements = self.draw_list()
        log.debug("Painting %d call type icons", len(placements))
        for placement in placements:
            img = self._resources.image_for(placement.category)
            if surface.mode == "RGBA":
                surface.alpha_composite(img, dest=(placement.left, placement.top))
            else:
                surface.paste(img, (placement.left, placement.top), img)
