"""Data models for OncoFusion."""

from oncofusion.models.fusion import FusionEvent, FusionPair, PromiscuousGene, event_rank
from oncofusion.models.output import KnownFusionOutput

__all__ = [
    "FusionEvent",
    "FusionPair",
    "PromiscuousGene",
    "KnownFusionOutput",
    "event_rank",
]
