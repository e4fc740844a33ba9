"""
Configuration module for sample group report export.
Contains all constants, column lists, and default settings.
"""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class SampleExportConfig:
    """Configuration for sample export module"""

    # ==================== File Handling ====================
    MAX_FILE_SIZE_MB: int = 500
    ALLOWED_EXTENSIONS: List[str] = field(default_factory=lambda: ['.tsv', '.txt'])

    # ==================== Column Selection ====================
    # Descriptive columns copied into every group sheet (order matters)
    REQUIRED_COLUMNS: List[str] = field(default_factory=lambda: [
        'Protein.Group',
        'Protein.Names',
        'Genes',
        'First.Protein.Description',
        'N.Sequences',
        'N.Proteotypic.Sequences'
    ])

    # Cell values treated as missing (case-sensitive)
    MISSING_VALUE_TOKENS: List[str] = field(default_factory=lambda: ['NA', 'na'])

    # ==================== Sample Groups ====================
    DEFAULT_SAMPLE_GROUPS: List[str] = field(default_factory=lambda: [
        'CTRL_Saline',
        'CTRL_Cocaine',
        'ABX_Saline',
        'ABX_Cocaine'
    ])

    # ==================== Workbook ====================
    ALL_SHEET_NAME: str = 'All'
    DEFAULT_CLIENT_LABEL: str = 'Report'
    FILENAME_TEMPLATE: str = '{label}_Report_{date}.xlsx'
    FILENAME_DATE_FORMAT: str = '%m%d%y'
    EXCEL_ENGINE: str = 'xlsxwriter'
    # Cells are written verbatim, never as formulas or hyperlinks
    EXCEL_WRITER_OPTIONS: Dict[str, bool] = field(default_factory=lambda: {
        'strings_to_formulas': False,
        'strings_to_urls': False
    })
    EXCEL_MIME: str = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'

    # ==================== Progress Milestones (percent) ====================
    PROGRESS_START: float = 10
    PROGRESS_ALL_SHEET: float = 20
    PROGRESS_GROUPS_SPAN: float = 70
    PROGRESS_FILENAME: float = 95
    PROGRESS_DONE: float = 100

    # ==================== UI ====================
    PREVIEW_ROWS: int = 10


# Singleton instance
config = SampleExportConfig()


def get_config() -> SampleExportConfig:
    """Get the global configuration instance"""
    return config


def update_config(**kwargs):
    """Update configuration parameters"""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
        else:
            raise ValueError(f"Unknown configuration parameter: {key}")


def reset_config() -> SampleExportConfig:
    """Restore the default configuration"""
    global config
    config = SampleExportConfig()
    return config
