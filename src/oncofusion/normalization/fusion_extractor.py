"""Heuristic extraction of fusion partners from free-text descriptions.

Knowledge bases describe fusions as free text ("BCR-ABL1", "EML4_ALK",
"NTRK1 fusion") next to a gene symbol that may be spelled differently from
the text. Given the gene symbol and a separator, these functions decide
whether the gene is the 5' or 3' partner and pull out the other partner's name.

The gene is located in the text by its first three letters only, so suffix
variations (isoform tags, older symbols such as ABL for ABL1) still match.

Examples:
    >>> extract_fusion("ABL1", "BCR-ABL1", "-")
    FusionPair(event_type='fusion_pair', five_gene='BCR', three_gene='ABL1')
    >>> extract_fusion("NTRK1", "NTRK1 fusion", "-")
    PromiscuousGene(event_type='promiscuous_gene', gene='NTRK1')
"""

import re
from collections.abc import Iterable

from oncofusion.config.constants import GENE_GROUP, GENE_PATTERN, GENE_PREFIX_LENGTH
from oncofusion.config.debug import get_logger
from oncofusion.models.fusion import FusionPair, PromiscuousGene, event_rank

logger = get_logger(__name__)


def gene_start_letters(gene: str) -> str:
    """First three characters of the gene symbol (the whole symbol if shorter)."""
    return gene[:GENE_PREFIX_LENGTH]


def is_three_gene(gene: str, fusion: str, separator: str) -> bool:
    """True if the gene prefix directly follows the separator."""
    return f"{separator}{gene_start_letters(gene)}" in fusion


def is_five_gene(gene: str, fusion: str, separator: str) -> bool:
    """True if the gene prefix occurs in the text and is not the 3' partner."""
    return not is_three_gene(gene, fusion, separator) and gene_start_letters(gene) in fusion


def _extract_gene(fusion: str, pattern: str) -> str | None:
    match = re.search(pattern, fusion)
    return match.group(1) if match else None


def extract_five_gene(gene: str, fusion: str, separator: str) -> str | None:
    """Name preceding "<separator><gene prefix>", i.e. the 5' partner of the gene."""
    pattern = f"{GENE_GROUP}{re.escape(separator)}{re.escape(gene_start_letters(gene))}"
    return _extract_gene(fusion, pattern)


def extract_three_gene(gene: str, fusion: str, separator: str) -> str | None:
    """Name following "<gene prefix>...<separator>", i.e. the 3' partner of the gene."""
    pattern = f"{re.escape(gene_start_letters(gene))}{GENE_PATTERN}*{re.escape(separator)}{GENE_GROUP}"
    return _extract_gene(fusion, pattern)


def five_gene(gene: str, fusion: str, separator: str) -> str | None:
    # Trust the given symbol over whatever spelling the text uses
    if is_five_gene(gene, fusion, separator):
        return gene
    return extract_five_gene(gene, fusion, separator)


def three_gene(gene: str, fusion: str, separator: str) -> str | None:
    if is_three_gene(gene, fusion, separator):
        return gene
    return extract_three_gene(gene, fusion, separator)


def extract_fusion(
    gene: str,
    fusion: str,
    separator: str | Iterable[str],
) -> FusionPair | PromiscuousGene:
    """Resolve the fusion event described by `fusion` for the known `gene`.

    Args:
        gene: Known gene symbol (e.g., "ABL1")
        fusion: Free-text fusion description (e.g., "BCR-ABL1")
        separator: A single separator, or an ordered collection of candidate
            separators (see extract_fusion_multi)

    Returns:
        FusionPair if both partners could be resolved, PromiscuousGene otherwise
    """
    if not isinstance(separator, str):
        return extract_fusion_multi(gene, fusion, separator)

    five = five_gene(gene, fusion, separator)
    three = three_gene(gene, fusion, separator)
    if five is None or three is None:
        return PromiscuousGene(gene=gene)
    return FusionPair(five_gene=five, three_gene=three)


def extract_fusion_multi(
    gene: str,
    fusion: str,
    separators: Iterable[str],
) -> FusionPair | PromiscuousGene:
    """Resolve the fusion against every separator and keep the best candidate.

    A FusionPair beats a PromiscuousGene. Among candidates of equal rank the
    first one in separator order wins.

    Raises:
        ValueError: If no separators are given
    """
    candidates = []
    for separator in separators:
        candidate = extract_fusion(gene, fusion, separator)
        logger.debug(f"Separator {separator!r} on {fusion!r} for {gene}: {candidate!r}")
        candidates.append(candidate)

    if not candidates:
        raise ValueError("At least one separator is required to extract a fusion")

    # min() keeps the first of equally ranked candidates
    return min(candidates, key=event_rank)


__all__ = [
    "gene_start_letters",
    "is_five_gene",
    "is_three_gene",
    "extract_five_gene",
    "extract_three_gene",
    "five_gene",
    "three_gene",
    "extract_fusion",
    "extract_fusion_multi",
]
