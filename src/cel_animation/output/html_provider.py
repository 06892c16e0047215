"""Standalone HTML preview output provider."""

import re
from html import escape
from typing import Sequence

from ..constants import DEFAULT_SELECTOR, PREVIEW_CEL_SIZE
from ..declarations import StyleOutput
from ..images import CelImage
from .base import OutputProvider

_CLASS_SELECTOR = re.compile(r"\.-?[_a-zA-Z][_a-zA-Z0-9-]*")


class HtmlPreviewOutputProvider(OutputProvider):
    """Output provider that wraps the stylesheet in a page showing the animation."""

    def __init__(
        self,
        path: str = "",
        selector: str = DEFAULT_SELECTOR,
        images: Sequence[CelImage] = (),
    ):
        """
        Initialize the provider.

        Args:
            path: Path to the HTML file
            selector: Class selector of the animated container (``.name``)
            images: Optional image per cel; numbered placeholders are used otherwise
        """
        super().__init__(path, selector)
        if not _CLASS_SELECTOR.fullmatch(selector):
            raise ValueError(
                f"HTML preview needs a single class selector such as '{DEFAULT_SELECTOR}' "
                f"(got '{selector}')"
            )
        self.images = tuple(images)

    def encode(self, style: StyleOutput) -> bytes:
        cel_count = len(style.bindings)
        if self.images and len(self.images) != cel_count:
            raise ValueError(
                f"Expected {cel_count} images, one per cel (got {len(self.images)})"
            )

        width, height = self._stage_size()
        page = "\n".join(
            [
                "<!DOCTYPE html>",
                '<html lang="en">',
                "<head>",
                '<meta charset="utf-8">',
                "<title>Cel animation preview</title>",
                "<style>",
                self._stage_css(width, height),
                style.to_css(self.selector).rstrip("\n"),
                "</style>",
                "</head>",
                "<body>",
                f'<div class="{escape(self.selector[1:])}">',
                *self._cel_elements(cel_count),
                "</div>",
                "</body>",
                "</html>",
            ]
        )
        return (page + "\n").encode("utf-8")

    def _stage_size(self) -> tuple[int, int]:
        if not self.images:
            return PREVIEW_CEL_SIZE, PREVIEW_CEL_SIZE
        return (
            max(image.width for image in self.images),
            max(image.height for image in self.images),
        )

    def _stage_css(self, width: int, height: int) -> str:
        # Cels are stacked in one grid cell so only the visible one shows.
        return "\n".join(
            [
                f"{self.selector} {{ display: grid; width: {width}px; height: {height}px; }}",
                f"{self.selector} > * {{ grid-area: 1 / 1; margin: 0; }}",
            ]
        )

    def _cel_elements(self, cel_count: int) -> list[str]:
        if self.images:
            return [
                f'<img src="{image.data_url}" width="{image.width}" height="{image.height}" '
                f'alt="cel {index}">'
                for index, image in enumerate(self.images, start=1)
            ]
        return [
            f'<div style="display: flex; align-items: center; justify-content: center; '
            f'font: bold 32px sans-serif;">{index}</div>'
            for index in range(1, cel_count + 1)
        ]
