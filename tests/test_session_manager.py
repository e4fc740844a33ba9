"""Tests for SessionManager: upload replacement and export bookkeeping."""

import pytest

from proteomics_reports.sample_export import (
    EmptyInputError,
    ExportError,
    ExportSession,
    FileTooLargeError,
    NoDataError,
    SessionManager,
    update_config,
)


@pytest.fixture
def manager():
    return SessionManager()


@pytest.fixture
def session():
    return ExportSession()


class TestUpload:

    def test_upload_sets_dataset(self, manager, session, pg_matrix_text):
        dataset = manager.load_upload(session, pg_matrix_text.encode("utf-8"), "pg_matrix.tsv")
        assert session.dataset is dataset
        assert session.file_name == "pg_matrix.tsv"
        assert dataset.n_rows == 3

    def test_failed_upload_keeps_previous_dataset(self, manager, session, pg_matrix_text):
        previous = manager.load_upload(session, pg_matrix_text.encode("utf-8"), "first.tsv")
        with pytest.raises(EmptyInputError):
            manager.load_upload(session, b"\n\n", "empty.tsv")
        assert session.dataset is previous
        assert session.file_name == "first.tsv"

    def test_new_upload_replaces_dataset(self, manager, session, pg_matrix_text):
        manager.load_upload(session, pg_matrix_text.encode("utf-8"), "first.tsv")
        dataset = manager.load_upload(session, b"Genes\tG1\nA\t1\n", "second.tsv")
        assert session.dataset is dataset
        assert session.dataset.headers == ("Genes", "G1")

    def test_file_size_limit(self, manager, session):
        update_config(MAX_FILE_SIZE_MB=0)
        with pytest.raises(FileTooLargeError):
            SessionManager().load_upload(session, b"Genes\nA\n", "big.tsv")
        assert session.dataset is None


class TestCanProcess:

    def test_requires_dataset_and_group(self, manager, session, pg_matrix_text):
        assert not session.can_process
        session.registry.add("CTRL_Saline")
        assert not session.can_process
        manager.load_upload(session, pg_matrix_text.encode("utf-8"))
        assert session.can_process
        assert session.trigger_enabled

    def test_trigger_disabled_while_running(self, session, pg_matrix):
        session.dataset = pg_matrix
        session.registry.add("G1")
        session.export_running = True
        assert session.can_process
        assert not session.trigger_enabled


class TestRunExport:

    def test_export_records_result(self, manager, session, pg_matrix):
        session.dataset = pg_matrix
        session.registry.load_defaults()
        session.client_label = "Acme"
        seen = []

        result = manager.run_export(session, progress=seen.append)

        assert session.last_export is result
        assert result.filename.startswith("Acme_Report_")
        assert result.sheet_names == ("All", "CTRL_Saline", "ABX_Saline", "ABX_Cocaine")
        assert session.progress == 100
        assert seen[-1] == 100
        assert session.export_running is False

    def test_running_flag_cleared_on_failure(self, manager, session):
        with pytest.raises(NoDataError):
            manager.run_export(session)
        assert session.export_running is False
        assert session.last_export is None

    def test_export_error_propagates(self, manager, session):
        session.dataset = manager.parser.parse("Genes\tAll_x\nA\t1\n")
        session.registry.add("All")
        with pytest.raises(ExportError):
            manager.run_export(session)
        assert session.export_running is False
        assert session.last_export is None

    def test_running_flag_set_during_export(self, manager, session, pg_matrix):
        session.dataset = pg_matrix
        session.registry.add("G1")
        flags = []
        manager.run_export(session, progress=lambda percent: flags.append(session.export_running))
        assert all(flags)
