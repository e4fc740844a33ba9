"""
Sample Group Report Export
==========================

Streamlit entry point: upload a tab-separated protein table, define sample
groups and download one Excel workbook with a sheet per group.

Run: streamlit run app.py
"""

import streamlit as st

from proteomics_reports.sample_export import get_session_manager, run_export_module

# ============================================================================
# PAGE CONFIGURATION
# ============================================================================

st.set_page_config(
    page_title="Sample Group Report Export",
    page_icon="🧬",
    layout="wide",
    initial_sidebar_state="expanded",
)

# ============================================================================
# SIDEBAR
# ============================================================================

with st.sidebar:
    st.title("🧬 Proteomics Reports")
    st.markdown("---")

    st.markdown("""
    ### Sample Group Export

    **Steps:**
    1. Upload a tab-separated result file
    2. Add sample groups (or load the defaults)
    3. Enter the client name and generate the report

    Each sample group keeps the protein descriptors plus every
    column whose header contains the group name.
    """)

    st.markdown("---")

    if st.button("🔄 Reset Session", key="reset_session_btn"):
        get_session_manager().clear_session()
        st.rerun()

# ============================================================================
# MAIN CONTENT
# ============================================================================

run_export_module()

# ============================================================================
# FOOTER
# ============================================================================

st.markdown("---")
st.markdown("""
<div style='text-align: center; color: #666;'>
    <p>Proteomics Reports v0.1.0</p>
    <p>Built with Streamlit • Pandas • Plotly</p>
</div>
""", unsafe_allow_html=True)
