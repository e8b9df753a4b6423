"""In-memory gene coordinate index.

Gene records from the annotation are loaded into a dict for O(1) lookup
by gene identifier. Later records for the same gene_id replace earlier ones.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from gtf_tpm_combinator.models import GeneRecord, Statistics
from gtf_tpm_combinator.parsers.gtf import parse_gtf

logger = logging.getLogger(__name__)


class AnnotationIndex:
    """Gene identifier to coordinate index built from a GTF annotation.

    Usage:
        index = AnnotationIndex()
        index.load(Path("genes.gtf"))
        record = index.get("ENSG0001")
    """

    def __init__(self) -> None:
        """Initialize empty index."""
        self._by_gene_id: dict[str, GeneRecord] = {}

    def load(self, filepath: Path, stats: Statistics | None = None) -> None:
        """Load gene records from a GTF file.

        Args:
            filepath: Path to GTF file (may be gzipped)
            stats: Optional Statistics object to update (mutated in place)

        Raises:
            FileAccessError: If the file cannot be opened
            LineReadError: If a line cannot be read
        """
        logger.info(f"Indexing gene records from {filepath}")
        self.add_all(parse_gtf(filepath), stats)
        logger.info(f"Indexed {len(self):,} genes from {filepath.name}")

    def add_all(
        self,
        records: Iterable[GeneRecord],
        stats: Statistics | None = None,
    ) -> None:
        """Insert records in order, last write wins.

        Args:
            records: Gene records in annotation order
            stats: Optional Statistics object to update (mutated in place)
        """
        for record in records:
            self._by_gene_id[record.gene_id] = record
            if stats is not None:
                stats.gene_records += 1

        if stats is not None:
            stats.genes_indexed = len(self)

    def get(self, gene_id: str) -> GeneRecord | None:
        """Look up a gene by identifier.

        Args:
            gene_id: Gene identifier (join key)

        Returns:
            GeneRecord if found, None otherwise
        """
        return self._by_gene_id.get(gene_id)

    def __len__(self) -> int:
        """Return number of distinct genes in the index."""
        return len(self._by_gene_id)

    def __contains__(self, gene_id: str) -> bool:
        """Check if a gene identifier is indexed."""
        return gene_id in self._by_gene_id

    def clear(self) -> None:
        """Clear all loaded data to free memory."""
        self._by_gene_id.clear()
