"""Join, filter and sort stages of the combinator pipeline."""

from gtf_tpm_combinator.processing.joiner import join_row, join_rows
from gtf_tpm_combinator.processing.relevance import discard_reason, filter_rows
from gtf_tpm_combinator.processing.sorter import genomic_sort_key, sort_rows

__all__ = [
    "join_row",
    "join_rows",
    "discard_reason",
    "filter_rows",
    "genomic_sort_key",
    "sort_rows",
]
