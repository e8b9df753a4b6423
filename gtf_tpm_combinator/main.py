"""Main orchestration for the GTF/TPM combinator.

Implements run_combine(), which runs the pipeline stages in order:
index annotation, join and filter matrix rows, sort, write table.
"""

import logging
from collections.abc import Iterator

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

from gtf_tpm_combinator.config import Config
from gtf_tpm_combinator.index.gene_index import AnnotationIndex
from gtf_tpm_combinator.models import Statistics
from gtf_tpm_combinator.parsers.matrix import read_matrix
from gtf_tpm_combinator.processing.joiner import join_rows
from gtf_tpm_combinator.processing.relevance import filter_rows
from gtf_tpm_combinator.processing.sorter import sort_rows
from gtf_tpm_combinator.writers.summary import print_summary, write_summary_file
from gtf_tpm_combinator.writers.table import TableWriter

logger = logging.getLogger(__name__)


def run_combine(config: Config, console: Console | None = None) -> Statistics:
    """Run the full annotate-filter-sort pipeline.

    Main entry point that coordinates:
    1. Loading gene coordinates from the GTF annotation
    2. Streaming the expression matrix, joining and filtering each row
    3. Sorting kept rows by chromosome and start
    4. Writing the output table (and summary file, if configured)

    Args:
        config: Configuration with file paths and filter tier
        console: Console for progress and summary output (default: stderr)

    Returns:
        Statistics for the run

    Raises:
        FileAccessError: If an input cannot be opened or the output created
        LineReadError: If an input line cannot be read
        EmptyInputError: If the expression matrix has no header
        OutputWriteError: If writing the output fails
    """
    if console is None:
        console = Console(stderr=True)

    stats = Statistics()

    if config.threads > 1:
        logger.debug(f"threads={config.threads} requested; running single-threaded")

    # Step 1: Load annotation index
    console.print(f"Reading {config.gtf_file.name}")
    index = AnnotationIndex()
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task(f"Indexing genes from {config.gtf_file.name}...")
        index.load(config.gtf_file, stats)
    console.print(f"Loaded {len(index):,} genes from annotation\n")

    # Step 2: Join and filter matrix rows
    console.print(f"Processing {config.matrix_file.name}")
    header, rows = read_matrix(config.matrix_file)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TextColumn("{task.completed:,.0f} rows"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task(f"Joining rows from {config.matrix_file.name}...", total=None)

        def advancing(rows: Iterator[list[str]]) -> Iterator[list[str]]:
            for row in rows:
                progress.advance(task)
                yield row

        enriched = join_rows(advancing(rows), index, stats)
        kept = list(filter_rows(enriched, config.filter_tier, stats))

    index.clear()
    logger.info(
        f"Joined {stats.matrix_rows:,} rows: {stats.matched:,} matched, "
        f"{stats.unmatched:,} unmatched, {stats.retained:,} kept"
    )

    # Step 3: Sort
    ordered = sort_rows(kept)

    # Step 4: Write output
    with TableWriter(config.output_file) as writer:
        writer.write_header(header)
        writer.write_rows(ordered)
    logger.info(f"Wrote {writer.row_count:,} rows to {config.output_file}")

    if config.summary_file is not None:
        write_summary_file(config.summary_file, config, stats)

    print_summary(stats, console)
    console.print(f"\n  Output file:  {config.output_file}")
    if config.summary_file is not None:
        console.print(f"  Summary file: {config.summary_file}")

    return stats
