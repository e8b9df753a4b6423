"""Run summary for the console and an optional summary file."""

from pathlib import Path

from rich.console import Console

from gtf_tpm_combinator.config import Config
from gtf_tpm_combinator.models import DiscardReason, Statistics

DISCARD_LABELS: dict[DiscardReason, str] = {
    DiscardReason.MISSING_COORDINATES: "Missing coordinates",
    DiscardReason.NON_CHROMOSOMAL: "Non-chromosomal (no chr prefix)",
    DiscardReason.SEX_OR_MITOCHONDRIAL: "Sex/mitochondrial (X, Y, M)",
    DiscardReason.NON_STANDARD_CHROMOSOME: "Non-standard chromosome",
}


def summary_lines(stats: Statistics) -> list[str]:
    """Format run statistics as text lines.

    Args:
        stats: Statistics collected during the run

    Returns:
        Lines of the summary block, without newlines
    """
    lines = [
        "Annotation",
        f" Gene records read {stats.gene_records}",
        f" Distinct genes indexed {stats.genes_indexed}",
        f" Duplicate gene records replaced {stats.duplicate_gene_records}",
        "",
        "Expression matrix",
        f" Rows read {stats.matrix_rows}",
        f" Matched to annotation {stats.matched}",
        f" No match in annotation {stats.unmatched}",
        "",
        "Filter",
    ]
    for reason, label in DISCARD_LABELS.items():
        lines.append(f" {label} {stats.discarded[reason]}")
    lines.append(f" Total removed {stats.total_discarded}")
    lines.append(f" Rows written {stats.retained}")
    return lines


def write_summary_file(output_path: Path, config: Config, stats: Statistics) -> Path:
    """Write options and run statistics to a text file.

    Args:
        output_path: Path of the summary file
        config: Configuration used for the run
        stats: Statistics collected during the run

    Returns:
        Path to the written file
    """
    with open(output_path, "w") as f:
        f.write("Options Set:\n")
        f.write(f"GTF filename:                {config.gtf_file}\n")
        f.write(f"Matrix filename:             {config.matrix_file}\n")
        f.write(f"Output filename:             {config.output_file}\n")
        f.write(f"Filter tier:                 {int(config.filter_tier)}\n")
        f.write(f"Threads:                     {config.threads}\n")
        f.write("\n\n")

        for line in summary_lines(stats):
            f.write(f"{line}\n")

    return output_path


def print_summary(stats: Statistics, console: Console) -> None:
    """Print run statistics to the console.

    Args:
        stats: Statistics collected during the run
        console: Rich console (stderr in the CLI)
    """
    console.print()
    for line in summary_lines(stats):
        console.print(line, highlight=False)
