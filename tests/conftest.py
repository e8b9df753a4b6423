"""Pytest fixtures for gtf_tpm_combinator tests."""

from pathlib import Path

import pytest

from gtf_tpm_combinator.logging_config import reset_logging


@pytest.fixture(autouse=True)
def clean_logging():
    """Reset root logger handlers around each test."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def sample_files(tmp_path: Path) -> dict[str, Path]:
    """Create a small annotation and matrix for integration testing.

    Test cases:
    - G1: chr7:100-200 -> kept at every tier, "7" at tier 4
    - G2: absent from annotation -> kept only at tier 0
    - G3: chrX -> dropped from tier 3
    - G4: scaffold_9 (no chr prefix) -> dropped from tier 2
    - G5: chr1:5000, annotated twice -> last record (5000-6000) wins
    - G6: chrUn_KI270302v1 -> dropped at tier 4 only
    - G7: chr2:50 -> sorts between chr1 and chr7
    - G8: chrM -> dropped from tier 3
    - G9: exon feature only -> treated as missing
    """
    gtf = tmp_path / "genes.gtf"
    gtf.write_text(
        "#!genome-build GRCh38\n"
        "#!genome-version GRCh38\n"
        "chr7\tsrc\tgene\t100\t200\t.\t+\t.\tgene_id \"G1\"; gene_name \"A\";\n"
        "chr7\tsrc\texon\t100\t150\t.\t+\t.\tgene_id \"G1\"; exon_number \"1\";\n"
        "chrX\tsrc\tgene\t300\t400\t.\t-\t.\tgene_id \"G3\";\n"
        "scaffold_9\tsrc\tgene\t10\t20\t.\t+\t.\tgene_id \"G4\";\n"
        "chr1\tsrc\tgene\t1\t2\t.\t+\t.\tgene_id \"G5\";\n"
        "chr1\tsrc\tgene\t5000\t6000\t.\t+\t.\tgene_id \"G5\";\n"
        "chrUn_KI270302v1\tsrc\tgene\t7\t8\t.\t+\t.\tgene_id \"G6\";\n"
        "chr2\tsrc\tgene\t50\t60\t.\t+\t.\tgene_id \"G7\";\n"
        "chrM\tsrc\tgene\t577\t647\t.\t+\t.\tgene_id \"G8\";\n"
        "chr3\tsrc\texon\t9\t10\t.\t+\t.\tgene_id \"G9\";\n"
        "chr4\tsrc\tgene\t1\n"
    )

    matrix = tmp_path / "tpm.tsv"
    matrix.write_text(
        "gene_id\tsample1\tsample2\n"
        "G1\t5.2\t1.0\n"
        "G2\t3.1\t0.0\n"
        "G3\t0.5\t0.5\n"
        "\n"
        "G4\t1.1\t2.2\n"
        "G5\t9.9\t8.8\n"
        "G6\t0.1\t0.2\n"
        "G7\t4.4\t4.4\n"
        "G8\t7.7\t7.6\n"
        "G9\t6.0\t6.0\n"
    )

    return {"gtf": gtf, "matrix": matrix, "dir": tmp_path}
