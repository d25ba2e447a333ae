"""
I/O module for hgvsg.

Provides the VCF reader and the TSV writer for HGVS descriptions.
"""

from .input import VariantReader, VcfReader
from .output import HgvsWriter, OutputWriter

__all__ = [
    "HgvsWriter",
    "OutputWriter",
    "VariantReader",
    "VcfReader",
]
