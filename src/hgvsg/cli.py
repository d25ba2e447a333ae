"""
CLI Entry Point: Exposes the hgvsg functionality via command line.
"""

from pathlib import Path

import typer
from pydantic import ValidationError

from . import __version__
from .assembly import GenomeAssembly
from .core.kernel import CoordinateKernel
from .hgvs import describe
from .models.core import HgvsConfig
from .pipeline import Pipeline
from .utils.logging import console, setup_logging

app = typer.Typer(help="hgvsg: HGVS genomic notation for VCF variants")


@app.callback()
def main():
    """
    hgvsg: HGVS genomic notation for VCF variants
    """
    pass


@app.command()
def version():
    """Show the hgvsg version."""
    typer.echo(f"py-hgvsg {__version__}")


@app.command()
def run(
    variant_file: Path = typer.Option(
        ..., "--variants", "-v", help="Path to VCF/BCF file containing variants"
    ),
    output_file: Path = typer.Option(
        ..., "--output", "-o", help="TSV file to write HGVS descriptions to"
    ),
    assembly: str = typer.Option(
        "hg19", "--assembly", "-a", help="Genome assembly (hg19/GRCh37 or hg38/GRCh38)"
    ),
    threads: int = typer.Option(1, "--threads", "-t", help="Number of worker threads"),
    log_file: Path | None = typer.Option(None, "--log-file", help="Also write logs to this file"),
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Enable verbose debug logging"),
):
    """
    Describe every variant in a VCF in HGVS genomic notation.
    """
    setup_logging(verbose=verbose, log_file=str(log_file) if log_file else None)

    try:
        config = HgvsConfig(
            variant_file=variant_file,
            output_file=output_file,
            assembly=assembly,
            threads=threads,
        )
        Pipeline(config).run()

    except Exception as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        raise typer.Exit(code=1) from e


@app.command("format")
def format_variant(
    chrom: str = typer.Argument(..., help="Chromosome, e.g. 17 or chr17"),
    pos: int = typer.Argument(..., help="1-based VCF position"),
    ref: str = typer.Argument(..., help="Reference allele"),
    alt: str = typer.Argument(..., help="Alternate allele, literal or symbolic (<DEL>)"),
    end: int | None = typer.Option(None, "--end", "-e", help="End position for symbolic alleles"),
    svtype: str | None = typer.Option(
        None, "--type", help="SVTYPE for generic symbolic alleles such as <CN0>, e.g. DEL"
    ),
    assembly: str = typer.Option(
        "hg19", "--assembly", "-a", help="Genome assembly (hg19/GRCh37 or hg38/GRCh38)"
    ),
    show_category: bool = typer.Option(
        False, "--category", help="Also print the HGVS category"
    ),
):
    """
    Describe a single variant in HGVS genomic notation.
    """
    try:
        genome = GenomeAssembly.parse(assembly)
        variant = CoordinateKernel.vcf_to_variant(
            contig=genome.contig(chrom), pos=pos, ref=ref, alt=alt, end=end, svtype=svtype
        )
        category, hgvs = describe(variant)
    except (ValueError, ValidationError) as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        raise typer.Exit(code=1) from e

    if show_category:
        typer.echo(f"{hgvs}\t{category.value}")
    else:
        typer.echo(hgvs)


if __name__ == "__main__":
    app()
