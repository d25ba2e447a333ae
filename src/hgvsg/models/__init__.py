"""
Data models for hgvsg.

Provides Pydantic models for contigs, variants, coordinate systems and configuration.
"""

from .core import Contig, CoordinateSystem, GenomicVariant, HgvsConfig, VariantType

__all__ = [
    "Contig",
    "CoordinateSystem",
    "GenomicVariant",
    "HgvsConfig",
    "VariantType",
]
