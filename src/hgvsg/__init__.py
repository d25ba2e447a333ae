"""
hgvsg - HGVS genomic (g.) notation for genomic variants.

This package provides a command-line interface and Python API for describing
SNVs, indels and symbolic structural variants in HGVS genomic notation
against RefSeq chromosome accessions.

Example usage:
    $ hgvsg run -v variants.vcf -o variants.hgvs.tsv --assembly hg19
    $ hgvsg format 17 45221273 A C
"""

__version__ = "1.0.0"

from .assembly import GenomeAssembly
from .hgvs import MutationCategory, classify, describe, format_variants, to_hgvs_genomic
from .models.core import Contig, CoordinateSystem, GenomicVariant, HgvsConfig, VariantType
from .pipeline import Pipeline

__all__ = [
    "__version__",
    "Contig",
    "CoordinateSystem",
    "GenomeAssembly",
    "GenomicVariant",
    "HgvsConfig",
    "MutationCategory",
    "Pipeline",
    "VariantType",
    "classify",
    "describe",
    "format_variants",
    "to_hgvs_genomic",
]
