"""Tests for SampleExportModule: status messages at the UI boundary."""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from proteomics_reports.sample_export import ExportSession, SampleExportModule, SessionManager

APP_PATH = Path(__file__).resolve().parent.parent / "app.py"


@pytest.fixture
def module():
    return SampleExportModule(session_manager=SessionManager())


@pytest.fixture
def session():
    return ExportSession()


class TestStatusMessages:

    def test_upload_success(self, module, session, pg_matrix_text):
        module.handle_upload(session, pg_matrix_text.encode("utf-8"), "pg.tsv")
        assert session.status.level == "success"
        assert session.status.message == "File uploaded successfully!"

    def test_upload_failure_keeps_dataset(self, module, session, pg_matrix_text):
        module.handle_upload(session, pg_matrix_text.encode("utf-8"), "pg.tsv")
        dataset = session.dataset
        module.handle_upload(session, b"  \n", "blank.tsv")
        assert session.status.level == "error"
        assert session.status.message == "Error parsing file: File is empty"
        assert session.dataset is dataset

    def test_add_group(self, module, session):
        module.add_group(session, " CTRL_Saline ")
        assert session.registry.groups == ("CTRL_Saline",)
        assert session.status.message == "Added sample group: CTRL_Saline"

    def test_add_blank_group(self, module, session):
        module.add_group(session, "  ")
        assert session.status.level == "error"
        assert session.status.message == "Please enter a sample group name"

    def test_add_duplicate_group(self, module, session):
        module.add_group(session, "X")
        module.add_group(session, "X")
        assert session.registry.groups == ("X",)
        assert session.status.message == "This sample group already exists"

    def test_remove_and_defaults(self, module, session):
        module.load_defaults(session)
        assert session.status.message == "Loaded default sample groups"
        module.remove_group(session, "CTRL_Cocaine")
        assert "CTRL_Cocaine" not in session.registry
        assert session.status.message == "Removed sample group: CTRL_Cocaine"

    def test_export_without_data(self, module, session):
        assert module.export(session) is None
        assert session.status.level == "error"
        assert session.status.message == "Please upload a file and add at least one sample group"
        assert session.progress == 0

    def test_export_failure_resets_progress(self, module, session):
        module.handle_upload(session, b"Genes\tAll_x\nA\t1\n", "bad.tsv")
        module.add_group(session, "All")
        assert module.export(session) is None
        assert session.status.message.startswith("Error generating Excel file: ")
        assert session.progress == 0
        assert session.export_running is False

    def test_export_success(self, module, session, pg_matrix_text):
        module.handle_upload(session, pg_matrix_text.encode("utf-8"), "pg.tsv")
        module.add_group(session, "ABX_Saline")
        result = module.export(session)
        assert result is session.last_export
        assert session.status.level == "success"
        assert session.status.message == f"Excel file generated successfully: {result.filename}"

    def test_progress_reset_after_success(self, module, session, pg_matrix_text):
        module.handle_upload(session, pg_matrix_text.encode("utf-8"), "pg.tsv")
        module.add_group(session, "ABX_Saline")
        seen = []
        module.export(session, progress=seen.append)
        assert seen[-1] == 100
        assert session.progress == 0
        assert session.export_running is False


class TestApp:

    def test_app_renders(self):
        at = AppTest.from_file(str(APP_PATH)).run(timeout=30)
        assert not at.exception
        assert at.button(key="process_btn").disabled

    def test_load_defaults_button(self):
        at = AppTest.from_file(str(APP_PATH)).run(timeout=30)
        at.button(key="load_defaults_btn").click().run(timeout=30)
        assert not at.exception
        session = at.session_state["sample_export_session"]
        assert session.registry.groups == ("CTRL_Saline", "CTRL_Cocaine", "ABX_Saline", "ABX_Cocaine")
        # no dataset yet
        assert at.button(key="process_btn").disabled

    def test_reset_session_clears_groups(self):
        at = AppTest.from_file(str(APP_PATH)).run(timeout=30)
        at.button(key="load_defaults_btn").click().run(timeout=30)
        at.button(key="reset_session_btn").click().run(timeout=30)
        assert not at.exception
        session = at.session_state["sample_export_session"]
        assert session.registry.groups == ()
        assert session.dataset is None


class TestPackage:

    def test_package_metadata(self):
        import proteomics_reports

        assert proteomics_reports.__version__ == "0.1.0"
        assert proteomics_reports.__author__ == "Proteomics Team"
