"""GTF annotation parser.

Streams gene records out of a GTF (or GTF-like) annotation. Supports gzipped
files.

GTF format (tab-separated, 9 columns, '#' comments):
seqname  source  feature  start  end  score  strand  frame  attributes
chr7     HAVANA  gene     100    200  .      +       .      gene_id "G1"; gene_name "A";
"""

from collections.abc import Iterator
from pathlib import Path

from gtf_tpm_combinator.io_utils import iter_lines
from gtf_tpm_combinator.models import GeneRecord

GTF_COLUMNS = 9
GENE_FEATURE = "gene"


def extract_gene_id(attributes: str) -> str | None:
    """Extract the gene identifier from a GTF attribute column.

    The identifier is the quoted value of the first attribute, i.e. the
    text between the first pair of double quotes before the first ';'.

    Args:
        attributes: GTF column 9 (e.g. 'gene_id "ENSG0001"; gene_name "A";')

    Returns:
        Gene identifier, or None if the first attribute has no quoted value

    Example:
        >>> extract_gene_id('gene_id "ENSG0001"; gene_name "A";')
        "ENSG0001"
        >>> extract_gene_id("gene_id ENSG0001;")
        None
    """
    first_attribute = attributes.split(";", 1)[0]
    parts = first_attribute.split('"')
    if len(parts) < 2 or not parts[1]:
        return None
    return parts[1]


def parse_gene_line(line: str) -> GeneRecord | None:
    """Parse one GTF line into a gene record.

    Args:
        line: Annotation line without trailing newline

    Returns:
        GeneRecord for gene features; None for comments, other feature
        types, lines with fewer than 9 columns or no gene identifier
    """
    if line.startswith("#"):
        return None

    parts = line.split("\t")
    if len(parts) < GTF_COLUMNS or parts[2] != GENE_FEATURE:
        return None

    gene_id = extract_gene_id(parts[8])
    if gene_id is None:
        return None

    return GeneRecord(
        gene_id=gene_id,
        chromosome=parts[0],
        start=parts[3],
        end=parts[4],
    )


def parse_gtf(filepath: Path) -> Iterator[GeneRecord]:
    """Stream gene records from a GTF file.

    Malformed and non-gene lines are skipped without notice.

    Args:
        filepath: Path to GTF file (may be gzipped)

    Yields:
        GeneRecord for each gene feature, in file order

    Raises:
        FileAccessError: If the file cannot be opened
        LineReadError: If a line cannot be read

    Example:
        >>> for gene in parse_gtf(Path("genes.gtf")):
        ...     print(gene.gene_id, gene.chromosome)
    """
    for line in iter_lines(filepath):
        record = parse_gene_line(line)
        if record is not None:
            yield record
