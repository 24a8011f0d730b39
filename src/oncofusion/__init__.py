"""OncoFusion - fusion event reading for cancer knowledge-base imports.

Public API:
    >>> from oncofusion import FusionReader, FusionPair
    >>> reader = FusionReader(separators=["-", "_"])
    >>> reader.read("ABL1", "BCR-ABL1")
    FusionPair(event_type='fusion_pair', five_gene='BCR', three_gene='ABL1')
"""

__version__ = "0.1.0"

from oncofusion.models import FusionEvent, FusionPair, PromiscuousGene, KnownFusionOutput
from oncofusion.normalization import (
    FusionReader,
    ReaderConfig,
    ReaderConfigError,
    extract_fusion,
)

__all__ = [
    # Version
    "__version__",
    # Reader
    "FusionReader",
    "ReaderConfig",
    "ReaderConfigError",
    "extract_fusion",
    # Models
    "FusionEvent",
    "FusionPair",
    "PromiscuousGene",
    "KnownFusionOutput",
]
