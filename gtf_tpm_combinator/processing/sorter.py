"""Genomic ordering of enriched rows."""

from collections.abc import Iterable

from gtf_tpm_combinator.models import EnrichedRow
from gtf_tpm_combinator.utils import chromosome_rank, parse_int


def genomic_sort_key(row: EnrichedRow) -> tuple[int, int]:
    """Sort key: chromosome rank, then start coordinate.

    Args:
        row: Enriched row (display chromosome may or may not carry "chr")

    Returns:
        (rank, start) with unparseable starts treated as 0
    """
    return chromosome_rank(row.chromosome), parse_int(row.start)


def sort_rows(rows: Iterable[EnrichedRow]) -> list[EnrichedRow]:
    """Order rows by chromosome (1-22, X, Y, M, others) and start.

    The whole input is materialized in memory.

    Args:
        rows: Filtered rows

    Returns:
        New list in genomic order
    """
    return sorted(rows, key=genomic_sort_key)
