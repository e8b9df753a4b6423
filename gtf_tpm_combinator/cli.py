"""Typer CLI for the GTF/TPM combinator.

Usage:
    # Default: keep chr1-chr22 only, write ./output.tsv
    gtf-tpm-combinator -g genes.gtf -m tpm.tsv

    # Keep every matrix row, coordinates or not
    gtf-tpm-combinator -g genes.gtf.gz -m tpm.tsv -o annotated.tsv --filter 0
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from gtf_tpm_combinator import __version__

app = typer.Typer(
    name="gtf-tpm-combinator",
    help="Combine a GTF annotation and a TPM matrix into a start/end aligned table",
    add_completion=False,
)

console = Console(stderr=True)


@app.command()
def combine(
    gtf: Annotated[
        Path,
        typer.Option(
            "--gtf", "-g",
            help="Input GTF annotation (may be gzipped)",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    tpm: Annotated[
        Path,
        typer.Option(
            "--tpm", "-m",
            help="Input TPM matrix (tsv, gene_id in first column; may be gzipped or /dev/stdin)",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    output: Annotated[
        Path,
        typer.Option(
            "--output", "-o",
            help="Output file (tsv)",
            file_okay=True,
            dir_okay=False,
        ),
    ] = Path("./output.tsv"),
    threads: Annotated[
        int,
        typer.Option(
            "--threads", "-t",
            help="Number of threads (0 or more; accepted for compatibility, runs single-threaded)",
            min=0,
        ),
    ] = 1,
    filter_tier: Annotated[
        int,
        typer.Option(
            "--filter", "-f",
            help=(
                "Filter tier: 0 keep all, 1 drop unmatched genes, 2 also drop "
                "non-chr sequences, 3 also drop X/Y/M, 4 keep only chr1-22"
            ),
            min=0,
            max=4,
        ),
    ] = 4,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose", "-v",
            help="Enable verbose logging",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write the full debug log to this file",
            dir_okay=False,
        ),
    ] = None,
    summary: Annotated[
        Path | None,
        typer.Option(
            "--summary",
            help="Write options and run statistics to this file",
            dir_okay=False,
        ),
    ] = None,
) -> None:
    """Annotate a TPM matrix with gene coordinates from a GTF file.

    Each matrix row is looked up by its first column (gene_id) in the
    GTF gene records, given Chr/start/end columns, filtered by the
    chosen tier and sorted by chromosome (1-22, X, Y, M, others) and
    start position.

    Example usage:

        gtf-tpm-combinator -g gencode.gtf -m tpm.tsv -o tpm_located.tsv

        # Keep sex chromosomes and unplaced contigs with chr prefix
        gtf-tpm-combinator -g gencode.gtf -m tpm.tsv --filter 2
    """
    from gtf_tpm_combinator.config import Config
    from gtf_tpm_combinator.logging_config import setup_logging
    from gtf_tpm_combinator.main import run_combine

    setup_logging(verbose=verbose, log_file=log_file)

    # Print banner
    console.print("\n")
    console.print("[bold]GTF/TPM Matrix Combinator[/bold]", style="blue")
    console.print(f"v{__version__}\n")

    config = Config(
        gtf_file=gtf,
        matrix_file=tpm,
        output_file=output,
        threads=threads,
        filter_tier=filter_tier,
        verbose=verbose,
        log_file=log_file,
        summary_file=summary,
    )

    # Print options
    console.print("Options Set:")
    console.print(f"GTF filename:                {config.gtf_file}", highlight=False)
    console.print(f"Matrix filename:             {config.matrix_file}", highlight=False)
    console.print(f"Output filename:             {config.output_file}", highlight=False)
    console.print(f"Filter tier:                 {int(config.filter_tier)}", highlight=False)
    console.print(f"Threads:                     {config.threads}", highlight=False)
    if config.verbose:
        console.print("Verbose logging flag set")
    console.print("\n")

    errors = config.validate()
    if errors:
        for error in errors:
            console.print(f"[red]ERROR:[/red] {error}")
        raise typer.Exit(code=1)

    try:
        run_combine(config, console=console)
    except Exception as e:
        console.print(f"[red]ERROR:[/red] {e}")
        if verbose:
            import traceback
            console.print(traceback.format_exc())
        raise typer.Exit(code=1)

    console.print("\n[green]Done.[/green]\n")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
