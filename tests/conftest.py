"""
Shared pytest fixtures for proteomics_reports tests.

TSV content is kept inline; workbooks are built in memory so nothing is
written to disk.
"""

import pytest

from proteomics_reports.sample_export.config import reset_config
from proteomics_reports.sample_export.parser import parse_tsv

# ---------------------------------------------------------------------------
# TSV content
# ---------------------------------------------------------------------------

PG_MATRIX = (
    "Protein.Group\tProtein.Names\tGenes\tFirst.Protein.Description\tN.Sequences\t"
    "N.Proteotypic.Sequences\tS1_CTRL_Saline\tS2_CTRL_Saline\tS1_ABX_Saline\tS1_ABX_Cocaine\n"
    "P01\tALBU_MOUSE\tAlb\tAlbumin\t12\t11\t1.5\t2.5\tNA\t\n"
    "P02\tTRFE_MOUSE\tTf\tSerotransferrin\t8\t8\tNA\tna\t3.1\t\n"
    "P03\tHBA_MOUSE\tHba\tHemoglobin subunit alpha\t4\t3\t\t0\tNA\t7.7\n"
)

SMALL_TSV = (
    "Genes\tFoo_CTRL_Saline\tFoo_ABX_Saline\n"
    "Alb\tNA\t5.2\n"
)

SHORT_ROWS_TSV = (
    "A\tB\tC\n"
    "1\t2\n"
    "\n"
    "4\t5\t6\t7\n"
    "   \n"
)


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts from the default configuration."""
    yield reset_config()
    reset_config()


@pytest.fixture
def pg_matrix_text():
    return PG_MATRIX


@pytest.fixture
def pg_matrix(pg_matrix_text):
    return parse_tsv(pg_matrix_text)


@pytest.fixture
def small_dataset():
    return parse_tsv(SMALL_TSV)


@pytest.fixture
def short_rows_text():
    return SHORT_ROWS_TSV
