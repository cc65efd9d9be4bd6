# topmark:header:start
#
#   project      : JsonShape
#   file         : __init__.py
#   file_relpath : src/jsonshape/registry/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-type export declarations consumed by the renderer."""

from __future__ import annotations

from jsonshape.registry.exports import ExportRegistry, ExportSpec, MutableExportRegistry

__all__ = [
    "ExportRegistry",
    "ExportSpec",
    "MutableExportRegistry",
]
