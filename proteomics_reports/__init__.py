"""
Proteomics Reports Package
Sample group report export for proteomics result tables
"""

__version__ = "0.1.0"
__author__ = "Proteomics Team"

# Lazy import to keep core modules importable without the UI
def get_export_module():
    from .sample_export import SampleExportModule, run_export_module
    return SampleExportModule, run_export_module
