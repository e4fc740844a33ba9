"""
Excel report export.

Builds a workbook with one "All" sheet holding the full dataset, followed by
one sheet per sample group (in registry order). Groups without any usable row
are skipped. Progress is reported through an optional callback receiving a
percentage between 0 and 100.
"""

import io
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

import pandas as pd
from loguru import logger

from .config import get_config
from .exceptions import ExportError, NoDataError
from .parser import Dataset
from .sample_filter import SampleFilter, get_sample_filter

ProgressCallback = Callable[[float], None]


@dataclass
class ExportResult:
    """Serialized workbook ready for download"""
    content: bytes
    filename: str
    sheet_names: Tuple[str, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator:
        # Allows ``content, filename = pipeline.export(...)``
        return iter((self.content, self.filename))


def build_filename(client_label: Optional[str], today: Optional[date] = None) -> str:
    """
    Report filename for a client label and date.

    Examples:
        ('Acme', 2024-03-05) -> 'Acme_Report_030524.xlsx'
        ('', 2024-03-05)     -> 'Report_Report_030524.xlsx'
    """
    config = get_config()
    if today is None:
        today = date.today()
    label = (client_label or '').strip() or config.DEFAULT_CLIENT_LABEL
    return config.FILENAME_TEMPLATE.format(
        label=label,
        date=today.strftime(config.FILENAME_DATE_FORMAT)
    )


class ExportPipeline:
    """Orchestrates workbook creation for a dataset and its sample groups"""

    def __init__(self, sample_filter: Optional[SampleFilter] = None):
        self.config = get_config()
        self.sample_filter = sample_filter or get_sample_filter()

    def export(self, dataset: Optional[Dataset], groups: Sequence[str],
               client_label: Optional[str] = None,
               progress: Optional[ProgressCallback] = None,
               today: Optional[date] = None) -> ExportResult:
        """
        Build and serialize the report workbook.

        Args:
            dataset: Parsed upload
            groups: Sample group names, in sheet order
            client_label: Prefix of the output filename
            progress: Called with the completion percentage
            today: Date used in the filename (defaults to today)

        Returns:
            ExportResult with workbook bytes and filename

        Raises:
            NoDataError: if there is no dataset or no group
            ExportError: if building or serializing the workbook fails
        """
        groups = list(groups or [])
        if dataset is None or not groups:
            raise NoDataError()

        report = progress or (lambda percent: None)
        logger.info(f"Exporting {dataset.n_rows} rows for {len(groups)} sample groups")

        try:
            report(self.config.PROGRESS_START)

            sheets: List[Tuple[str, pd.DataFrame]] = [
                (self.config.ALL_SHEET_NAME, dataset.to_dataframe())
            ]
            report(self.config.PROGRESS_ALL_SHEET)

            increment = self.config.PROGRESS_GROUPS_SPAN / len(groups)
            for i, group in enumerate(groups):
                report(self.config.PROGRESS_ALL_SHEET + increment * (i + 1))

                projected = self.sample_filter.project(dataset, group)
                if projected:
                    sheets.append((group, pd.DataFrame(projected)))
                else:
                    logger.warning(f"No data found for sample: {group}")

            report(self.config.PROGRESS_FILENAME)
            filename = build_filename(client_label, today)

            content = self._serialize(sheets)
            report(self.config.PROGRESS_DONE)

        except Exception as exc:
            raise ExportError(exc) from exc

        sheet_names = tuple(name for name, _ in sheets)
        logger.info(f"Generated {filename} with sheets: {', '.join(sheet_names)}")
        return ExportResult(content=content, filename=filename, sheet_names=sheet_names)

    def _serialize(self, sheets: List[Tuple[str, pd.DataFrame]]) -> bytes:
        """Write sheets to an in-memory xlsx file"""
        seen = set()
        for name, _ in sheets:
            # Excel compares sheet names case-insensitively
            if name.casefold() in seen:
                raise ValueError(f"Worksheet with name '{name}' already exists")
            seen.add(name.casefold())

        buffer = io.BytesIO()
        with pd.ExcelWriter(buffer, engine=self.config.EXCEL_ENGINE,
                            engine_kwargs={"options": dict(self.config.EXCEL_WRITER_OPTIONS)}) as writer:
            for name, df in sheets:
                df.to_excel(writer, sheet_name=name, index=False)
        return buffer.getvalue()


def export_workbook(dataset: Optional[Dataset], groups: Sequence[str],
                    client_label: Optional[str] = None,
                    progress: Optional[ProgressCallback] = None,
                    today: Optional[date] = None) -> ExportResult:
    """Export with a default pipeline"""
    return get_export_pipeline().export(dataset, groups, client_label,
                                        progress=progress, today=today)


def get_export_pipeline() -> ExportPipeline:
    """Get export pipeline instance"""
    return ExportPipeline()
