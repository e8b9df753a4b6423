"""Gene coordinate index built from GTF annotations."""

from gtf_tpm_combinator.index.gene_index import AnnotationIndex

__all__ = ["AnnotationIndex"]
