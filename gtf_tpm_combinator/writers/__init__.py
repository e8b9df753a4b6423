"""Output writers for the annotated table and run summary."""

from gtf_tpm_combinator.writers.summary import print_summary, write_summary_file
from gtf_tpm_combinator.writers.table import TableWriter

__all__ = ["TableWriter", "print_summary", "write_summary_file"]
