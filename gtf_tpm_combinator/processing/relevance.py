"""Relevance filter for enriched rows.

Processing flow for each row, stopping at the first reason that applies
at the configured tier:
1. Missing coordinates (tier >= 1)
2. Chromosome without "chr" prefix (tier >= 2)
3. X, Y or M chromosome (tier >= 3)
4. Anything other than chr1-chr22 (tier 4)

At tier 4, kept rows have the "chr" prefix dropped from their chromosome.
"""

from collections.abc import Iterable, Iterator

from gtf_tpm_combinator.models import DiscardReason, EnrichedRow, FilterTier, Statistics
from gtf_tpm_combinator.utils import MAX_AUTOSOME, classify_chromosome


def discard_reason(row: EnrichedRow, tier: FilterTier) -> DiscardReason | None:
    """Decide whether a row is dropped at the given tier.

    Args:
        row: Joined matrix row
        tier: Filter tier

    Returns:
        Reason for dropping the row, or None if it is kept
    """
    if tier >= FilterTier.LOCATED and not row.is_located:
        return DiscardReason.MISSING_COORDINATES

    chrom = classify_chromosome(row.chromosome)

    if tier >= FilterTier.CHR_PREFIXED and chrom.is_non_chromosomal:
        return DiscardReason.NON_CHROMOSOMAL

    if tier >= FilterTier.NO_SEX_MITO and chrom.is_special:
        return DiscardReason.SEX_OR_MITOCHONDRIAL

    if tier >= FilterTier.AUTOSOMES and (
        not chrom.is_numeric or chrom.numeric_value > MAX_AUTOSOME
    ):
        return DiscardReason.NON_STANDARD_CHROMOSOME

    return None


def filter_rows(
    rows: Iterable[EnrichedRow],
    tier: FilterTier,
    stats: Statistics | None = None,
) -> Iterator[EnrichedRow]:
    """Drop rows that are not relevant at the given tier.

    Args:
        rows: Joined matrix rows
        tier: Filter tier
        stats: Optional Statistics object to update (mutated in place)

    Yields:
        Kept rows, in input order. At tier 4 the display chromosome is
        rewritten without its "chr" prefix (e.g. "chr7" -> "7").
    """
    for row in rows:
        reason = discard_reason(row, tier)
        if reason is not None:
            if stats is not None:
                stats.discarded[reason] += 1
            continue

        if tier == FilterTier.AUTOSOMES:
            row.chromosome = classify_chromosome(row.chromosome).suffix

        if stats is not None:
            stats.retained += 1
        yield row
