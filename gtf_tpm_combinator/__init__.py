"""
GTF/TPM Matrix Combinator.

Annotates a per-gene expression matrix with genomic coordinates taken from a
GTF annotation, filters rows by chromosome relevance and writes a
chromosome-ordered table.
"""

__version__ = "0.1.0"
__author__ = "Data Tecnica International"
