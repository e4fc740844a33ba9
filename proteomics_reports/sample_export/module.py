"""
Main sample export module orchestrator
"""

import streamlit as st
from loguru import logger

from .exceptions import (
    BlankNameError,
    DuplicateNameError,
    EmptyInputError,
    ExportError,
    FileTooLargeError,
    NoDataError,
)
from .session_manager import ExportSession, SessionManager, get_session_manager
from .ui_components import CoveragePreviewUI, ExportUI, FileUploadUI, SampleGroupUI


class SampleExportModule:
    """Main orchestrator for upload, sample group and export workflow"""

    PROCESSED_UPLOAD_KEY = 'sample_export_processed_upload'

    def __init__(self, session_manager: SessionManager = None):
        self.session_manager = session_manager or get_session_manager()
        self.upload_ui = FileUploadUI()

    def run(self):
        """Execute the complete export workflow"""

        st.title("🧬 Sample Group Report Export")

        session = self.session_manager.get_or_create_session()

        self._step1_file_upload(session)
        st.divider()
        self._step2_sample_groups(session)
        st.divider()
        self._step3_export(session)

        ExportUI.render_status(session.status)

    # ==================== Step 1 ====================

    def _step1_file_upload(self, session: ExportSession):
        uploaded_file = self.upload_ui.render_file_uploader()

        if uploaded_file is not None:
            upload_id = getattr(uploaded_file, 'file_id', None) or (uploaded_file.name, uploaded_file.size)
            if st.session_state.get(self.PROCESSED_UPLOAD_KEY) != upload_id:
                st.session_state[self.PROCESSED_UPLOAD_KEY] = upload_id
                with st.spinner("Loading data..."):
                    self.handle_upload(session, uploaded_file.getvalue(), uploaded_file.name)

        if session.dataset is not None:
            self.upload_ui.render_upload_summary(session.dataset, session.file_name)

    def handle_upload(self, session: ExportSession, data: bytes, file_name: str = None):
        """Parse uploaded bytes and report the outcome as a status message"""
        try:
            self.session_manager.load_upload(session, data, file_name)
        except (EmptyInputError, FileTooLargeError) as e:
            logger.warning(f"Failed to parse {file_name}: {e}")
            session.set_status(f"Error parsing file: {e}", 'error')
            return
        session.set_status("File uploaded successfully!", 'success')

    # ==================== Step 2 ====================

    def _step2_sample_groups(self, session: ExportSession):
        st.subheader("🏷️ Sample Groups")

        name = SampleGroupUI.render_group_form()
        if name is not None:
            self.add_group(session, name)

        if st.button("📋 Load Defaults", key="load_defaults_btn"):
            self.load_defaults(session)

        removed = SampleGroupUI.render_group_tags(session.registry.groups)
        if removed is not None:
            self.remove_group(session, removed)
            st.rerun()

        if session.dataset is not None:
            CoveragePreviewUI.render_group_coverage(session.dataset, session.registry.groups)

    def add_group(self, session: ExportSession, name: str):
        try:
            added = session.registry.add(name)
        except (BlankNameError, DuplicateNameError) as e:
            message = "This sample group already exists" if isinstance(e, DuplicateNameError) else str(e)
            session.set_status(message, 'error')
            return
        session.set_status(f"Added sample group: {added}", 'success')

    def remove_group(self, session: ExportSession, name: str):
        session.registry.remove(name)
        session.set_status(f"Removed sample group: {name}", 'info')

    def load_defaults(self, session: ExportSession):
        session.registry.load_defaults()
        session.set_status("Loaded default sample groups", 'info')

    # ==================== Step 3 ====================

    def _step3_export(self, session: ExportSession):
        st.subheader("📊 Generate Report")

        session.client_label = st.text_input(
            "Client name",
            value=session.client_label,
            placeholder="Report",
            key="client_name_input"
        )

        clicked = st.button(
            "🚀 Generate Excel Report",
            type="primary",
            disabled=not session.trigger_enabled,
            key="process_btn"
        )

        if clicked:
            progress_bar = st.progress(0, text="Processing data...")
            self.export(session, lambda percent: progress_bar.progress(
                int(percent), text=f"Processing data... {int(percent)}%"
            ))

        if session.last_export is not None:
            ExportUI.render_download(session.last_export)

    def export(self, session: ExportSession, progress=None):
        """Run the export and turn failures into status messages"""
        session.set_status("Processing data...", 'info')
        try:
            result = self.session_manager.run_export(session, progress=progress)
        except NoDataError as e:
            session.progress = 0
            session.set_status(str(e), 'error')
            return None
        except ExportError as e:
            logger.exception(f"Export failed: {e}")
            session.progress = 0
            session.set_status(f"Error generating Excel file: {e}", 'error')
            return None

        session.progress = 0
        session.set_status(f"Excel file generated successfully: {result.filename}", 'success')
        return result


def run_export_module():
    """Convenience function to run the sample export module"""
    module = SampleExportModule()
    module.run()
