"""
Session management for sample group report export.
Holds the per-user state (dataset, sample groups, client label, progress)
in an explicit session object that every operation receives.
"""

from dataclasses import dataclass, field
from typing import Optional

import streamlit as st
from loguru import logger

from .config import get_config
from .exceptions import FileTooLargeError
from .exporter import ExportPipeline, ExportResult, ProgressCallback, get_export_pipeline
from .parser import Dataset, TsvParser, get_tsv_parser, read_upload_text
from .sample_groups import SampleGroupRegistry, can_process


@dataclass
class StatusMessage:
    """Leveled status message shown to the user"""
    message: str
    level: str = 'info'  # 'info', 'success', 'error'


@dataclass
class ExportSession:
    """State of one user workflow"""
    dataset: Optional[Dataset] = None
    file_name: Optional[str] = None
    registry: SampleGroupRegistry = field(default_factory=SampleGroupRegistry)
    client_label: str = ''
    progress: float = 0
    status: Optional[StatusMessage] = None
    export_running: bool = False
    last_export: Optional[ExportResult] = None

    @property
    def can_process(self) -> bool:
        """Dataset uploaded and at least one sample group registered."""
        return can_process(self.dataset is not None, len(self.registry))

    @property
    def trigger_enabled(self) -> bool:
        """Whether the export button should be clickable."""
        return self.can_process and not self.export_running

    def set_status(self, message: str, level: str = 'info'):
        self.status = StatusMessage(message=message, level=level)


class SessionManager:
    """Manages export sessions and the operations performed on them"""

    SESSION_KEY = 'sample_export_session'

    def __init__(self, parser: Optional[TsvParser] = None,
                 pipeline: Optional[ExportPipeline] = None):
        self.config = get_config()
        self.parser = parser or get_tsv_parser()
        self.pipeline = pipeline or get_export_pipeline()

    def get_or_create_session(self) -> ExportSession:
        """Get the session stored in Streamlit state or create a new one"""
        if self.SESSION_KEY not in st.session_state:
            st.session_state[self.SESSION_KEY] = ExportSession()
        return st.session_state[self.SESSION_KEY]

    def clear_session(self) -> ExportSession:
        """Discard dataset, groups and results"""
        session = ExportSession()
        st.session_state[self.SESSION_KEY] = session
        logger.info("Session cleared")
        return session

    def load_upload(self, session: ExportSession, data: bytes,
                    file_name: Optional[str] = None) -> Dataset:
        """
        Parse uploaded file content into the session.

        The dataset is only replaced once parsing succeeded, so a failed
        upload keeps the previous one.

        Args:
            session: Target session
            data: Raw file bytes
            file_name: Original file name

        Returns:
            The new dataset
        """
        size_mb = len(data) / (1024 * 1024)
        if size_mb > self.config.MAX_FILE_SIZE_MB:
            raise FileTooLargeError(size_mb, self.config.MAX_FILE_SIZE_MB)

        dataset = self.parser.parse(read_upload_text(data))

        session.dataset = dataset
        session.file_name = file_name
        session.last_export = None
        logger.info(f"Loaded {file_name or 'upload'}: {dataset.n_rows} rows, "
                    f"{dataset.n_columns} columns")
        return dataset

    def run_export(self, session: ExportSession,
                   progress: Optional[ProgressCallback] = None) -> ExportResult:
        """
        Export the session's dataset and groups.

        The running flag is always cleared, whatever the outcome.
        """
        def track(percent: float):
            session.progress = percent
            if progress is not None:
                progress(percent)

        session.export_running = True
        session.last_export = None
        try:
            result = self.pipeline.export(
                session.dataset,
                session.registry.groups,
                session.client_label,
                progress=track
            )
        finally:
            session.export_running = False

        session.last_export = result
        return result


# Singleton instance
_session_manager = None


def get_session_manager() -> SessionManager:
    """Get or create session manager singleton"""
    global _session_manager
    if _session_manager is None:
        _session_manager = SessionManager()
    return _session_manager
