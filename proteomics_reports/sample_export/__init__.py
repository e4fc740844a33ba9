"""Sample Export Module
Parses TSV uploads, manages sample groups and builds the Excel report"""
from .config import get_config, update_config
from .exceptions import (
    SampleExportError,
    EmptyInputError,
    BlankNameError,
    DuplicateNameError,
    NoDataError,
    FileTooLargeError,
    ExportError,
)
from .parser import Dataset, TsvParser, get_tsv_parser, parse_tsv, read_upload_text
from .sample_groups import SampleGroupRegistry, can_process
from .sample_filter import SampleFilter, get_sample_filter
from .exporter import ExportPipeline, ExportResult, build_filename, export_workbook, get_export_pipeline
from .session_manager import ExportSession, SessionManager, StatusMessage, get_session_manager
from .module import SampleExportModule, run_export_module
__all__ = [
    'get_config',
    'update_config',
    'SampleExportError',
    'EmptyInputError',
    'BlankNameError',
    'DuplicateNameError',
    'NoDataError',
    'FileTooLargeError',
    'ExportError',
    'Dataset',
    'TsvParser',
    'get_tsv_parser',
    'parse_tsv',
    'read_upload_text',
    'SampleGroupRegistry',
    'can_process',
    'SampleFilter',
    'get_sample_filter',
    'ExportPipeline',
    'ExportResult',
    'build_filename',
    'export_workbook',
    'get_export_pipeline',
    'ExportSession',
    'SessionManager',
    'StatusMessage',
    'get_session_manager',
    'SampleExportModule',
    'run_export_module']
