"""Normalization module: reading fusion events from knowledge-base text.

Example usage:
    >>> from oncofusion.normalization import FusionReader
    >>> FusionReader().read("BCR", "BCR-ABL1")
    FusionPair(event_type='fusion_pair', five_gene='BCR', three_gene='ABL1')
"""

from oncofusion.normalization.fusion_extractor import (
    gene_start_letters,
    is_five_gene,
    is_three_gene,
    extract_five_gene,
    extract_three_gene,
    five_gene,
    three_gene,
    extract_fusion,
    extract_fusion_multi,
)
from oncofusion.normalization.fusion_reader import (
    FusionReader,
    ReaderConfig,
    ReaderConfigError,
)

__all__ = [
    # Extraction
    "gene_start_letters",
    "is_five_gene",
    "is_three_gene",
    "extract_five_gene",
    "extract_three_gene",
    "five_gene",
    "three_gene",
    "extract_fusion",
    "extract_fusion_multi",
    # Reader
    "FusionReader",
    "ReaderConfig",
    "ReaderConfigError",
]
