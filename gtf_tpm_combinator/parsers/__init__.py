"""Parsers for GTF annotations and expression matrices."""

from gtf_tpm_combinator.parsers.gtf import extract_gene_id, parse_gene_line, parse_gtf
from gtf_tpm_combinator.parsers.matrix import read_matrix

__all__ = [
    # Annotation
    "parse_gtf",
    "parse_gene_line",
    "extract_gene_id",
    # Expression matrix
    "read_matrix",
]
