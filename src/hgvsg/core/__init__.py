"""
Core module for hgvsg.

Provides the coordinate kernel for converting between coordinate systems
and building variants from VCF fields.
"""

from .kernel import CoordinateKernel

__all__ = ["CoordinateKernel"]
