"""Output providers for generated cel animations."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..constants import DEFAULT_SELECTOR
from .base import OutputProvider
from .css_provider import CssOutputProvider
from .html_provider import HtmlPreviewOutputProvider


@dataclass(frozen=True)
class OutputFormatSpec:
    extension: str
    provider_class: type[OutputProvider]


_OUTPUT_FORMATS: dict[str, OutputFormatSpec] = {
    "css": OutputFormatSpec(
        extension=".css",
        provider_class=CssOutputProvider,
    ),
    "html": OutputFormatSpec(
        extension=".html",
        provider_class=HtmlPreviewOutputProvider,
    ),
}


def resolve_output_provider(
    file_path: str,
    selector: str = DEFAULT_SELECTOR,
    **options: Any,
) -> OutputProvider:
    """
    Resolve the appropriate output provider based on file extension.

    Args:
        file_path: Output file path (extension determines format)
        selector: CSS selector of the animated container
        **options: Extra provider-specific keyword arguments

    Returns:
        An OutputProvider instance

    Raises:
        ValueError: If file extension is not supported
    """
    ext = Path(file_path).suffix.lower()
    spec = _output_spec_from_extension(ext)
    return spec.provider_class(file_path, selector, **options)


def supported_output_formats() -> tuple[str, ...]:
    """Return supported output format names."""
    return tuple(_OUTPUT_FORMATS.keys())


def _output_spec_from_extension(ext: str) -> OutputFormatSpec:
    output_format = ext.removeprefix(".")
    spec = _OUTPUT_FORMATS.get(output_format)
    if spec is not None:
        return spec
    supported = ", ".join(spec.extension for spec in _OUTPUT_FORMATS.values())
    raise ValueError(f"Unsupported output format: {ext}. Supported formats: {supported}")


__all__ = [
    "OutputFormatSpec",
    "OutputProvider",
    "CssOutputProvider",
    "HtmlPreviewOutputProvider",
    "resolve_output_provider",
    "supported_output_formats",
]
