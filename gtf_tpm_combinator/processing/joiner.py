"""Join expression matrix rows against the gene index.

Every matrix row produces exactly one EnrichedRow; rows for genes missing
from the annotation get empty coordinates rather than being dropped.
"""

from collections.abc import Iterable, Iterator

from gtf_tpm_combinator.index.gene_index import AnnotationIndex
from gtf_tpm_combinator.models import EnrichedRow, Statistics


def join_row(columns: list[str], index: AnnotationIndex) -> EnrichedRow:
    """Attach coordinates to one matrix row.

    Args:
        columns: Tab-split matrix fields, gene_id first
        index: Loaded annotation index

    Returns:
        EnrichedRow with the gene's chromosome/start/end, or empty strings
    """
    record = index.get(columns[0])
    if record is None:
        return EnrichedRow(chromosome="", start="", end="", columns=columns)
    return EnrichedRow(
        chromosome=record.chromosome,
        start=record.start,
        end=record.end,
        columns=columns,
    )


def join_rows(
    rows: Iterable[list[str]],
    index: AnnotationIndex,
    stats: Statistics | None = None,
) -> Iterator[EnrichedRow]:
    """Join matrix rows against the annotation index.

    Args:
        rows: Matrix data rows (header already removed)
        index: Loaded annotation index
        stats: Optional Statistics object to update (mutated in place)

    Yields:
        EnrichedRow for each input row, in input order
    """
    for columns in rows:
        enriched = join_row(columns, index)
        if stats is not None:
            stats.matrix_rows += 1
            if columns[0] in index:
                stats.matched += 1
            else:
                stats.unmatched += 1
        yield enriched
