"""Configuration dataclass for the GTF/TPM combinator."""

from dataclasses import dataclass
from pathlib import Path

from gtf_tpm_combinator.models import FilterTier


@dataclass
class Config:
    """Configuration for a combinator run.

    Attributes:
        gtf_file: Path to GTF annotation (may be gzipped)
        matrix_file: Path to tab-separated expression matrix (may be gzipped)
        output_file: Path of the output table
        threads: Worker thread count; accepted for compatibility, has no effect
        filter_tier: Relevance filter tier (0-4)
        verbose: Enable verbose logging
        log_file: Optional file receiving the full debug log
        summary_file: Optional file receiving the run summary
    """

    gtf_file: Path
    matrix_file: Path
    output_file: Path = Path("output.tsv")

    threads: int = 1
    filter_tier: FilterTier = FilterTier.AUTOSOMES

    # Behavior flags
    verbose: bool = False
    log_file: Path | None = None
    summary_file: Path | None = None

    def __post_init__(self) -> None:
        """Coerce paths and tier to their proper types."""
        if isinstance(self.gtf_file, str):
            self.gtf_file = Path(self.gtf_file)
        if isinstance(self.matrix_file, str):
            self.matrix_file = Path(self.matrix_file)
        if isinstance(self.output_file, str):
            self.output_file = Path(self.output_file)
        if isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)
        if isinstance(self.summary_file, str):
            self.summary_file = Path(self.summary_file)

        if not isinstance(self.filter_tier, FilterTier) and self.filter_tier in list(
            FilterTier
        ):
            self.filter_tier = FilterTier(self.filter_tier)

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors.

        Returns:
            List of error messages (empty if valid)
        """
        errors: list[str] = []

        if not self.gtf_file.exists():
            errors.append(f"GTF file not found: {self.gtf_file}")

        if not self.matrix_file.exists():
            errors.append(f"Expression matrix not found: {self.matrix_file}")

        output_dir = self.output_file.parent
        if not output_dir.exists():
            errors.append(f"Output directory does not exist: {output_dir}")

        if self.threads < 0:
            errors.append(f"threads must not be negative: {self.threads}")

        if self.filter_tier not in list(FilterTier):
            errors.append(
                f"filter tier must be between {min(FilterTier).value} and "
                f"{max(FilterTier).value}: {self.filter_tier}"
            )

        return errors
