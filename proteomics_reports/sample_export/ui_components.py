"""
Streamlit UI components for sample export module.
Contains reusable widgets and interface elements.
"""

import streamlit as st
import pandas as pd
import plotly.express as px
from typing import Optional, Sequence

from .config import get_config
from .exporter import ExportResult
from .parser import Dataset
from .sample_filter import SampleFilter, get_sample_filter
from .session_manager import StatusMessage


class FileUploadUI:
    """UI components for file upload"""

    def __init__(self):
        self.config = get_config()

    def render_file_uploader(self, key: str = "tsv_data_file") -> Optional[object]:
        """
        Render file upload widget

        Args:
            key: Unique key for widget

        Returns:
            Uploaded file object or None
        """
        st.subheader("📁 Upload Proteomics Data")

        st.markdown(f"""
        **Supported formats:** {', '.join(self.config.ALLOWED_EXTENSIONS)} (tab-separated)

        **Maximum file size:** {self.config.MAX_FILE_SIZE_MB} MB
        """)

        return st.file_uploader(
            "Choose a TSV file",
            type=[ext.replace('.', '') for ext in self.config.ALLOWED_EXTENSIONS],
            key=key,
            help="Upload a DIA-NN protein group matrix or similar tab-separated output"
        )

    @staticmethod
    def render_upload_summary(dataset: Dataset, file_name: Optional[str] = None):
        """Display row and column counts of the loaded file"""
        st.markdown("**File loaded successfully!**")

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("File", file_name or "-")
        with col2:
            st.metric("Rows", f"{dataset.n_rows:,}")
        with col3:
            st.metric("Columns", f"{dataset.n_columns:,}")

        with st.expander("👀 Data Preview", expanded=False):
            st.dataframe(
                dataset.to_dataframe().head(get_config().PREVIEW_ROWS),
                use_container_width=True
            )


class SampleGroupUI:
    """UI components for sample group editing"""

    @staticmethod
    def render_group_form(key: str = "sample_group_form") -> Optional[str]:
        """
        Text input with an Add button; pressing Enter submits too.

        Returns:
            Entered name when submitted, else None
        """
        with st.form(key, clear_on_submit=True):
            col1, col2 = st.columns([4, 1])
            with col1:
                name = st.text_input(
                    "Sample group name",
                    placeholder="e.g., CTRL_Saline",
                    label_visibility="collapsed"
                )
            with col2:
                submitted = st.form_submit_button("➕ Add", use_container_width=True)

        return name if submitted else None

    @staticmethod
    def render_group_tags(groups: Sequence[str]) -> Optional[str]:
        """
        List registered groups with a remove button each

        Returns:
            Name of the group to remove, if a button was clicked
        """
        if not groups:
            st.markdown("*No sample groups added yet*")
            return None

        removed = None
        for i, group in enumerate(groups):
            col1, col2 = st.columns([5, 1])
            with col1:
                st.markdown(f"🏷️ `{group}`")
            with col2:
                if st.button("✖", key=f"remove_group_{i}", help=f"Remove {group}"):
                    removed = group
        return removed


class CoveragePreviewUI:
    """Preview of what each sample group sheet will contain"""

    @staticmethod
    def build_coverage_table(dataset: Dataset, groups: Sequence[str],
                             sample_filter: Optional[SampleFilter] = None) -> pd.DataFrame:
        """Matching columns and kept rows per group"""
        sample_filter = sample_filter or get_sample_filter()
        records = []
        for group in groups:
            columns = sample_filter.matching_columns(dataset.headers, group)
            rows = sample_filter.project(dataset, group)
            records.append({
                'Sample Group': group,
                'Matching Columns': len(columns),
                'Rows Kept': len(rows),
                'Sheet': 'yes' if rows else 'skipped'
            })
        return pd.DataFrame(records, columns=['Sample Group', 'Matching Columns', 'Rows Kept', 'Sheet'])

    @classmethod
    def render_group_coverage(cls, dataset: Dataset, groups: Sequence[str]):
        st.subheader("🔍 Sample Group Coverage")

        if not groups:
            st.info("Add sample groups to preview their sheets")
            return

        coverage_df = cls.build_coverage_table(dataset, groups)

        col1, col2 = st.columns([1, 1])
        with col1:
            st.dataframe(coverage_df, use_container_width=True, hide_index=True)
        with col2:
            fig = px.bar(
                coverage_df,
                x='Sample Group',
                y='Rows Kept',
                title='Rows per Sample Group'
            )
            fig.update_layout(height=300, showlegend=False)
            st.plotly_chart(fig, use_container_width=True)


class ExportUI:
    """UI components for export progress and results"""

    @staticmethod
    def render_status(status: Optional[StatusMessage]):
        if status is None:
            return
        if status.level == 'success':
            st.success(status.message)
        elif status.level == 'error':
            st.error(status.message)
        else:
            st.info(status.message)

    @staticmethod
    def render_download(result: ExportResult, key: str = "download_report_btn"):
        """Download button for a generated workbook"""
        st.download_button(
            label=f"📥 Download {result.filename}",
            data=result.content,
            file_name=result.filename,
            mime=get_config().EXCEL_MIME,
            use_container_width=True,
            key=key
        )
        st.caption(f"Sheets: {', '.join(result.sheet_names)}")


__all__ = [
    'FileUploadUI',
    'SampleGroupUI',
    'CoveragePreviewUI',
    'ExportUI'
]
