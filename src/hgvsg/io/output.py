"""
Output Writers: Writing HGVS descriptions to tab-separated files.
"""

import csv
from pathlib import Path

from ..hgvs import MutationCategory
from ..models.core import GenomicVariant


class OutputWriter:
    """Abstract base class for output writers."""

    def write(self, variant: GenomicVariant, category: MutationCategory, hgvs: str) -> None:
        raise NotImplementedError

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class HgvsWriter(OutputWriter):
    """Writes one row per variant with its HGVS category and g. description."""

    fieldnames = [
        "chrom",
        "pos",
        "end",
        "id",
        "ref",
        "alt",
        "variant_type",
        "category",
        "hgvs_g",
    ]

    def __init__(self, path: Path):
        self.path = path
        self.file = open(path, "w", newline="")
        self.writer = csv.DictWriter(self.file, fieldnames=self.fieldnames, delimiter="\t")
        self.writer.writeheader()
        self.rows_written = 0

    def write(self, variant: GenomicVariant, category: MutationCategory, hgvs: str) -> None:
        self.writer.writerow(
            {
                "chrom": variant.contig.name,
                "pos": variant.start,
                "end": variant.end,
                "id": variant.id or ".",
                "ref": variant.ref,
                "alt": variant.alt,
                "variant_type": variant.variant_type.value,
                "category": category.value,
                "hgvs_g": hgvs,
            }
        )
        self.rows_written += 1

    def close(self) -> None:
        if not self.file.closed:
            self.file.close()
