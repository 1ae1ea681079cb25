from __future__ import annotations

from .canopy import CANOPY_ADAPTERS
from .echelon import ECHELON_ADAPTERS
from .generic import FALLBACK_ADAPTERS, GENERIC_ADAPTERS, RECEIPT_ADAPTERS
from .joule import JOULE_ADAPTERS
from .layerbank import LAYERBANK_ADAPTERS
from .meridian import MERIDIAN_ADAPTERS
from .mosaic import MOSAIC_ADAPTERS
from .moveposition import MOVEPOSITION_ADAPTERS
from .razor import RAZOR_ADAPTERS
from .yuzu import YUZU_ADAPTERS

__all__ = [
    "CANOPY_ADAPTERS",
    "ECHELON_ADAPTERS",
    "FALLBACK_ADAPTERS",
    "GENERIC_ADAPTERS",
    "JOULE_ADAPTERS",
    "LAYERBANK_ADAPTERS",
    "MERIDIAN_ADAPTERS",
    "MOSAIC_ADAPTERS",
    "MOVEPOSITION_ADAPTERS",
    "RAZOR_ADAPTERS",
    "RECEIPT_ADAPTERS",
    "YUZU_ADAPTERS",
]
