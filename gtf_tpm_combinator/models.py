"""Data models for the GTF/TPM combinator.

Records flowing through the pipeline: gene coordinates from the annotation,
matrix rows enriched with those coordinates, and run statistics.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto


class FilterTier(IntEnum):
    """How aggressively rows are excluded from the output.

    Each tier discards everything the previous tier discards, plus:
    - KEEP_ALL: nothing
    - LOCATED: rows without coordinates
    - CHR_PREFIXED: chromosomes without a "chr" prefix (scaffolds, contigs)
    - NO_SEX_MITO: X, Y and M chromosomes
    - AUTOSOMES: anything that is not chr1-chr22
    """

    KEEP_ALL = 0
    LOCATED = 1
    CHR_PREFIXED = 2
    NO_SEX_MITO = 3
    AUTOSOMES = 4


class DiscardReason(Enum):
    """Reasons for dropping a row from the output."""

    MISSING_COORDINATES = auto()
    NON_CHROMOSOMAL = auto()
    SEX_OR_MITOCHONDRIAL = auto()
    NON_STANDARD_CHROMOSOME = auto()


@dataclass(slots=True, frozen=True)
class GeneRecord:
    """Gene feature from a GTF annotation.

    Attributes:
        gene_id: Quoted value of the first attribute
        chromosome: Sequence name exactly as written (e.g. "chr7")
        start: Start coordinate as written
        end: End coordinate as written
    """

    gene_id: str
    chromosome: str
    start: str
    end: str


@dataclass(slots=True)
class EnrichedRow:
    """Expression matrix row with joined coordinates.

    Coordinates are empty strings when the gene is not in the annotation.

    Attributes:
        chromosome: Display chromosome (may be rewritten by the filter)
        start: Start coordinate as written in the annotation
        end: End coordinate as written in the annotation
        columns: Original matrix fields, gene_id first
    """

    chromosome: str
    start: str
    end: str
    columns: list[str]

    @property
    def gene_id(self) -> str:
        """Join key of the original matrix row."""
        return self.columns[0]

    @property
    def is_located(self) -> bool:
        """True if all three coordinate fields are present."""
        return bool(self.chromosome and self.start and self.end)


@dataclass(slots=True, frozen=True)
class ChromosomeClass:
    """Classification of a chromosome name used by the relevance filter.

    Attributes:
        suffix: Name with the "chr" prefix removed
        is_non_chromosomal: Name does not start with "chr"
        is_special: Suffix is X, Y or M
        is_numeric: Suffix is a non-negative decimal integer
        numeric_value: Parsed suffix (0 when not numeric)
    """

    suffix: str
    is_non_chromosomal: bool
    is_special: bool
    is_numeric: bool
    numeric_value: int


@dataclass
class Statistics:
    """Running counts for a combinator run."""

    # Annotation
    gene_records: int = 0
    genes_indexed: int = 0

    # Matrix join
    matrix_rows: int = 0
    matched: int = 0
    unmatched: int = 0

    # Filter
    discarded: dict[DiscardReason, int] = field(
        default_factory=lambda: {reason: 0 for reason in DiscardReason}
    )
    retained: int = 0

    @property
    def total_discarded(self) -> int:
        """Rows removed by the relevance filter."""
        return sum(self.discarded.values())

    @property
    def duplicate_gene_records(self) -> int:
        """Gene records that overwrote an earlier record with the same gene_id."""
        return self.gene_records - self.genes_indexed
