"""Utility functions for the GTF/TPM combinator.

Chromosome name handling shared by the relevance filter and the sorter,
and strict integer parsing for coordinates.
"""

import re
import sys

from gtf_tpm_combinator.models import ChromosomeClass

CHR_PREFIX = "chr"

# Rank for sex and mitochondrial chromosomes, after the autosomes
SPECIAL_CHROMOSOME_RANKS: dict[str, int] = {
    "X": 23,
    "Y": 24,
    "M": 25,
}

# Highest autosome number kept by the strictest filter tier
MAX_AUTOSOME = 22

# Rank for anything that is neither numeric nor X/Y/M; sorts last
UNRANKED = sys.maxsize

# Optional minus sign then ASCII digits, nothing else
INTEGER_PATTERN = re.compile(r"-?[0-9]+")


def strip_chr_prefix(chromosome: str) -> str:
    """Remove a leading "chr" from a chromosome name.

    Args:
        chromosome: Chromosome name (e.g. "chr7", "7", "scaffold_9")

    Returns:
        Name without the prefix; unchanged if there was none

    Example:
        >>> strip_chr_prefix("chrX")
        "X"
        >>> strip_chr_prefix("scaffold_9")
        "scaffold_9"
    """
    if chromosome.startswith(CHR_PREFIX):
        return chromosome[len(CHR_PREFIX):]
    return chromosome


def is_decimal(value: str) -> bool:
    """Check if a string is a non-empty run of ASCII digits."""
    return value.isascii() and value.isdigit()


def parse_int(value: str, default: int = 0) -> int:
    """Parse an integer, falling back to a default.

    Only an optional minus sign followed by ASCII digits is accepted.
    Forms int() would otherwise take, such as "1_000", " 100", "+5" or
    non-ASCII digits, give the default.

    Args:
        value: String to parse (e.g. a start coordinate)
        default: Value returned when parsing fails

    Returns:
        Parsed integer, or default if value is not a plain integer

    Example:
        >>> parse_int("100")
        100
        >>> parse_int("1_000")
        0
    """
    if INTEGER_PATTERN.fullmatch(value) is None:
        return default
    return int(value)


def classify_chromosome(chromosome: str) -> ChromosomeClass:
    """Classify a chromosome name for relevance filtering.

    Args:
        chromosome: Chromosome name as joined from the annotation

    Returns:
        ChromosomeClass describing prefix, special and numeric status

    Example:
        >>> classify_chromosome("chr7").numeric_value
        7
        >>> classify_chromosome("chrM").is_special
        True
    """
    suffix = strip_chr_prefix(chromosome)
    numeric = is_decimal(suffix)
    return ChromosomeClass(
        suffix=suffix,
        is_non_chromosomal=not chromosome.startswith(CHR_PREFIX),
        is_special=suffix in SPECIAL_CHROMOSOME_RANKS,
        is_numeric=numeric,
        numeric_value=int(suffix) if numeric else 0,
    )


def chromosome_rank(chromosome: str) -> int:
    """Get the canonical sort rank of a chromosome.

    Numeric names rank by value, then X=23, Y=24, M=25. Everything
    else (unplaced contigs, empty names) ranks last.

    Args:
        chromosome: Chromosome name, with or without "chr" prefix

    Returns:
        Sort rank

    Example:
        >>> chromosome_rank("chr2")
        2
        >>> chromosome_rank("Y")
        24
    """
    suffix = strip_chr_prefix(chromosome)
    if is_decimal(suffix):
        return min(int(suffix), UNRANKED)
    return SPECIAL_CHROMOSOME_RANKS.get(suffix, UNRANKED)
