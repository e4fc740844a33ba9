"""
Tab-separated text parsing for proteomics result files.
Turns raw upload text into an immutable Dataset of string-valued rows.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Tuple

import pandas as pd
from loguru import logger

from .exceptions import EmptyInputError

Row = Mapping[str, str]


@dataclass(frozen=True)
class Dataset:
    """Container for one parsed upload."""
    headers: Tuple[str, ...]
    rows: Tuple[Row, ...]

    @property
    def columns(self) -> Tuple[str, ...]:
        """Distinct column names in header order."""
        return tuple(dict.fromkeys(self.headers))

    @property
    def n_rows(self) -> int:
        """Number of data rows."""
        return len(self.rows)

    @property
    def n_columns(self) -> int:
        """Number of distinct columns per row."""
        return len(self.columns)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def to_dataframe(self) -> pd.DataFrame:
        """All rows as a string-typed dataframe, columns in header order."""
        return pd.DataFrame([dict(row) for row in self.rows],
                            columns=list(self.columns), dtype=str)


class TsvParser:
    """Parse tab-separated text into a Dataset"""

    LINE_SEPARATOR = '\n'
    CELL_SEPARATOR = '\t'

    def parse(self, text: str) -> Dataset:
        """
        Parse delimited text.

        Blank lines are discarded, the first remaining line is the header.
        Short lines are padded with empty strings and surplus cells are
        ignored. Duplicate header names keep the value of the last occurrence.

        Args:
            text: Raw file content

        Returns:
            Parsed dataset

        Raises:
            EmptyInputError: if the text contains no non-blank lines
        """
        lines = [line for line in text.split(self.LINE_SEPARATOR) if line.strip()]
        if not lines:
            raise EmptyInputError()

        headers = tuple(lines[0].split(self.CELL_SEPARATOR))
        rows = tuple(self._build_row(headers, line) for line in lines[1:])

        dataset = Dataset(headers=headers, rows=rows)
        logger.info(f"Parsed {dataset.n_rows} rows with {dataset.n_columns} columns")
        return dataset

    def _build_row(self, headers: Tuple[str, ...], line: str) -> Row:
        values = line.split(self.CELL_SEPARATOR)
        row = {}
        for index, header in enumerate(headers):
            row[header] = values[index] if index < len(values) else ''
        return MappingProxyType(row)


def read_upload_text(data: bytes) -> str:
    """
    Decode uploaded file content.

    Tries UTF-8 first (dropping a byte order mark) and falls back to latin-1.
    """
    try:
        return data.decode('utf-8-sig')
    except UnicodeDecodeError:
        logger.warning("Upload is not valid UTF-8, decoding as latin-1")
        return data.decode('latin-1')


def parse_tsv(text: str) -> Dataset:
    """Parse text with a default parser"""
    return get_tsv_parser().parse(text)


def get_tsv_parser() -> TsvParser:
    """Get TSV parser instance"""
    return TsvParser()
