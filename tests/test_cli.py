"""Tests for CLI module."""

from typer.testing import CliRunner

from hgvsg import __version__
from hgvsg.cli import app

runner = CliRunner()


def test_cli_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "py-hgvsg" in result.stdout
    assert __version__ in result.stdout


def test_cli_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "HGVS genomic notation" in result.stdout
    assert "format" in result.stdout
    assert "run" in result.stdout


def test_format_snv():
    result = runner.invoke(app, ["format", "17", "45221273", "A", "C"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "NC_000017.10:g.45221273A>C"


def test_format_symbolic_inversion_with_category():
    result = runner.invoke(
        app, ["format", "chr3", "38626065", "N", "<INV>", "--end", "38626082", "--category"]
    )
    assert result.exit_code == 0
    assert result.stdout.strip() == "NC_000003.11:g.38626065_38626082inv\tinv"


def test_format_generic_symbolic_allele_with_type():
    result = runner.invoke(
        app, ["format", "1", "500", "N", "<CN0>", "--end", "900", "--type", "DEL"]
    )
    assert result.exit_code == 0
    assert result.stdout.strip() == "NC_000001.10:g.500_900del"


def test_format_hg38():
    result = runner.invoke(app, ["format", "17", "100", "C", "CAA", "--assembly", "GRCh38"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "NC_000017.11:g.100_101insAA"


def test_format_invalid_assembly():
    result = runner.invoke(app, ["format", "17", "100", "A", "C", "--assembly", "hg17"])
    assert result.exit_code == 1


def test_format_invalid_variant():
    # position 0 is not a 1-based position
    result = runner.invoke(app, ["format", "17", "0", "A", "C"])
    assert result.exit_code == 1


def test_run_writes_output(sample_vcf, temp_dir):
    output = temp_dir / "out.tsv"
    result = runner.invoke(app, ["run", "-v", str(sample_vcf), "-o", str(output)])
    assert result.exit_code == 0
    assert output.exists()
    assert "NC_000017.10:g.45221273A>C" in output.read_text()


def test_run_missing_variant_file(temp_dir):
    result = runner.invoke(
        app, ["run", "-v", str(temp_dir / "missing.vcf"), "-o", str(temp_dir / "out.tsv")]
    )
    assert result.exit_code != 0


def test_run_missing_required_args():
    result = runner.invoke(app, ["run"])
    assert result.exit_code != 0
