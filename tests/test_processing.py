"""Tests for the join, relevance filter and sort stages."""

import pytest

from gtf_tpm_combinator.index.gene_index import AnnotationIndex
from gtf_tpm_combinator.models import (
    DiscardReason,
    EnrichedRow,
    FilterTier,
    GeneRecord,
    Statistics,
)
from gtf_tpm_combinator.processing.joiner import join_row, join_rows
from gtf_tpm_combinator.processing.relevance import discard_reason, filter_rows
from gtf_tpm_combinator.processing.sorter import genomic_sort_key, sort_rows
from gtf_tpm_combinator.utils import chromosome_rank, parse_int


def make_row(chromosome: str, start: str = "1", end: str = "2", gene_id: str = "G") -> EnrichedRow:
    """Build an enriched row with one expression value."""
    return EnrichedRow(chromosome=chromosome, start=start, end=end, columns=[gene_id, "1.0"])


@pytest.fixture
def index() -> AnnotationIndex:
    """Index with a single gene on chr7."""
    index = AnnotationIndex()
    index.add_all([GeneRecord("G1", "chr7", "100", "200")])
    return index


class TestJoiner:
    """Tests for the matrix joiner."""

    def test_hit(self, index: AnnotationIndex) -> None:
        """Known gene receives its coordinates."""
        row = join_row(["G1", "5.2"], index)

        assert row.chromosome == "chr7"
        assert row.start == "100"
        assert row.end == "200"
        assert row.columns == ["G1", "5.2"]

    def test_miss(self, index: AnnotationIndex) -> None:
        """Unknown gene gets empty coordinates and is kept."""
        row = join_row(["G2", "3.1"], index)

        assert (row.chromosome, row.start, row.end) == ("", "", "")
        assert row.gene_id == "G2"
        assert row.is_located is False

    def test_join_rows_keeps_every_row(self, index: AnnotationIndex) -> None:
        """No row is dropped and order is preserved."""
        stats = Statistics()
        rows = list(join_rows([["G2", "1"], ["G1", "2"], ["G3", "3"]], index, stats))

        assert [r.gene_id for r in rows] == ["G2", "G1", "G3"]
        assert stats.matrix_rows == 3
        assert stats.matched == 1
        assert stats.unmatched == 2


class TestDiscardReason:
    """Tests for the tiered discard policy."""

    @pytest.mark.parametrize("tier", list(FilterTier))
    def test_autosome_always_kept(self, tier: FilterTier) -> None:
        """chr1-chr22 with coordinates survives every tier."""
        assert discard_reason(make_row("chr22"), tier) is None

    def test_tier_zero_keeps_everything(self) -> None:
        """Tier 0 never discards."""
        for row in [make_row("", "", ""), make_row("scaffold_9"), make_row("chrX")]:
            assert discard_reason(row, FilterTier.KEEP_ALL) is None

    @pytest.mark.parametrize(
        "start,end",
        [("", "2"), ("1", ""), ("", "")],
    )
    def test_missing_coordinates(self, start: str, end: str) -> None:
        """Any empty coordinate field counts as missing from tier 1."""
        row = make_row("chr1", start, end)
        assert discard_reason(row, FilterTier.LOCATED) == DiscardReason.MISSING_COORDINATES

    def test_empty_chromosome_missing(self) -> None:
        """Empty chromosome counts as missing."""
        assert (
            discard_reason(make_row(""), FilterTier.LOCATED)
            == DiscardReason.MISSING_COORDINATES
        )

    def test_non_chromosomal(self) -> None:
        """Names without chr prefix drop from tier 2."""
        row = make_row("scaffold_9")
        assert discard_reason(row, FilterTier.LOCATED) is None
        assert discard_reason(row, FilterTier.CHR_PREFIXED) == DiscardReason.NON_CHROMOSOMAL
        assert discard_reason(row, FilterTier.AUTOSOMES) == DiscardReason.NON_CHROMOSOMAL

    def test_bare_autosome_is_non_chromosomal(self) -> None:
        """Ensembl-style '7' drops from tier 2 as well."""
        assert (
            discard_reason(make_row("7"), FilterTier.CHR_PREFIXED)
            == DiscardReason.NON_CHROMOSOMAL
        )

    @pytest.mark.parametrize("name", ["chrX", "chrY", "chrM"])
    def test_special(self, name: str) -> None:
        """Sex and mitochondrial chromosomes drop from tier 3."""
        row = make_row(name)
        assert discard_reason(row, FilterTier.CHR_PREFIXED) is None
        assert discard_reason(row, FilterTier.NO_SEX_MITO) == DiscardReason.SEX_OR_MITOCHONDRIAL

    @pytest.mark.parametrize("name", ["chrUn_KI270302v1", "chr23", "chr1_KI270706v1_random"])
    def test_non_standard(self, name: str) -> None:
        """Other chr-prefixed sequences drop only at tier 4."""
        row = make_row(name)
        assert discard_reason(row, FilterTier.NO_SEX_MITO) is None
        assert (
            discard_reason(row, FilterTier.AUTOSOMES)
            == DiscardReason.NON_STANDARD_CHROMOSOME
        )


class TestFilterRows:
    """Tests for filter_rows."""

    def test_tier_four_strips_prefix(self) -> None:
        """Kept rows lose their chr prefix at tier 4."""
        rows = list(filter_rows([make_row("chr7")], FilterTier.AUTOSOMES))
        assert rows[0].chromosome == "7"

    @pytest.mark.parametrize(
        "tier",
        [FilterTier.KEEP_ALL, FilterTier.LOCATED, FilterTier.CHR_PREFIXED, FilterTier.NO_SEX_MITO],
    )
    def test_lower_tiers_keep_prefix(self, tier: FilterTier) -> None:
        """Chromosome passes through unchanged below tier 4."""
        rows = list(filter_rows([make_row("chr7")], tier))
        assert rows[0].chromosome == "chr7"

    def test_chrx_tier_two_and_three(self) -> None:
        """chrX is kept (as chrX) at tier 2 and dropped at tier 3."""
        assert [r.chromosome for r in filter_rows([make_row("chrX")], FilterTier.CHR_PREFIXED)] == ["chrX"]
        assert list(filter_rows([make_row("chrX")], FilterTier.NO_SEX_MITO)) == []

    def test_statistics(self) -> None:
        """Discards are counted per reason."""
        stats = Statistics()
        rows = [
            make_row("", "", ""),
            make_row("scaffold_9"),
            make_row("chrY"),
            make_row("chrUn"),
            make_row("chr3"),
        ]

        kept = list(filter_rows(rows, FilterTier.AUTOSOMES, stats))

        assert len(kept) == 1
        assert stats.retained == 1
        assert stats.total_discarded == 4
        for reason in DiscardReason:
            assert stats.discarded[reason] == 1

    def test_tier_monotonicity(self) -> None:
        """Rows kept at tier k+1 are a subset of rows kept at tier k."""
        names = ["", "chr1", "chr22", "chr23", "7", "chrX", "chrM", "scaffold_9", "chrUn"]

        kept_by_tier = []
        for tier in FilterTier:
            rows = [make_row(name, gene_id=f"G{i}") for i, name in enumerate(names)]
            kept_by_tier.append({r.gene_id for r in filter_rows(rows, tier)})

        for lower, higher in zip(kept_by_tier, kept_by_tier[1:]):
            assert higher <= lower


class TestSorter:
    """Tests for genomic sorting."""

    def test_sort_key(self) -> None:
        """Key is rank then numeric start."""
        assert genomic_sort_key(make_row("chrX", "300")) == (23, 300)
        assert genomic_sort_key(make_row("7", "abc")) == (7, 0)

    def test_chromosome_order(self) -> None:
        """Numeric chromosomes sort numerically, then X, Y, M, others."""
        names = ["chrUn", "chrM", "chr10", "chrY", "chr2", "chrX", "chr1", ""]
        ordered = [r.chromosome for r in sort_rows(make_row(n) for n in names)]

        assert ordered[:6] == ["chr1", "chr2", "chr10", "chrX", "chrY", "chrM"]
        assert set(ordered[6:]) == {"chrUn", ""}

    def test_start_is_numeric(self) -> None:
        """Start compares as an integer, not a string."""
        rows = [make_row("chr1", "1000"), make_row("chr1", "200"), make_row("chr1", "30")]
        assert [r.start for r in sort_rows(rows)] == ["30", "200", "1000"]

    def test_unparseable_start_is_zero(self) -> None:
        """Empty or invalid start sorts as 0."""
        rows = [make_row("chr1", "5"), make_row("chr1", "")]
        assert [r.start for r in sort_rows(rows)] == ["", "5"]

    def test_underscored_start_is_zero(self) -> None:
        """A start written with a digit separator sorts as 0."""
        rows = [make_row("chr1", "1_000", gene_id="A"), make_row("chr1", "500", gene_id="B")]
        assert [r.gene_id for r in sort_rows(rows)] == ["A", "B"]

    def test_sort_invariant(self) -> None:
        """Adjacent rows never violate the (rank, start) order."""
        rows = [
            make_row(chrom, start)
            for chrom in ["chr3", "chrX", "chr1", "chrM", "chr3", "scaffold", "chr1"]
            for start in ["50", "7", "", "1200"]
        ]

        ordered = sort_rows(rows)

        for a, b in zip(ordered, ordered[1:]):
            rank_a, rank_b = chromosome_rank(a.chromosome), chromosome_rank(b.chromosome)
            assert rank_a <= rank_b
            if rank_a == rank_b:
                assert parse_int(a.start) <= parse_int(b.start)
