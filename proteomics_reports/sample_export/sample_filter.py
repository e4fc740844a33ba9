"""
Per sample group projection of a parsed dataset.

A group sheet keeps the descriptive protein columns plus every column whose
header contains the group name. Rows without a single usable value in the
group columns are dropped.
"""

from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from loguru import logger

from .config import get_config


class SampleFilter:
    """Project dataset rows onto one sample group"""

    def __init__(self, required_columns: Optional[Sequence[str]] = None,
                 missing_tokens: Optional[Iterable[str]] = None):
        config = get_config()
        self.required_columns = list(
            required_columns if required_columns is not None else config.REQUIRED_COLUMNS
        )
        self.missing_tokens = frozenset(
            missing_tokens if missing_tokens is not None else config.MISSING_VALUE_TOKENS
        )

    def project(self, rows: Iterable[Mapping[str, str]], group_name: str) -> List[Dict[str, str]]:
        """
        Build the rows of one group sheet.

        Args:
            rows: Dataset or any iterable of row mappings
            group_name: Substring matched against column names (case-sensitive)

        Returns:
            Filtered rows, empty if no column matches the group
        """
        projected = []
        for row in rows:
            output = self._project_row(row, group_name)
            if self._has_group_value(output, group_name):
                projected.append(output)

        logger.debug(f"Projection for '{group_name}': {len(projected)} rows")
        return projected

    def _project_row(self, row: Mapping[str, str], group_name: str) -> Dict[str, str]:
        output = {}
        for col in self.required_columns:
            if col in row:
                output[col] = row[col]

        # Group columns may overwrite a descriptive column of the same name
        for key, value in row.items():
            if group_name in key:
                output[key] = value

        return output

    def _has_group_value(self, output: Mapping[str, str], group_name: str) -> bool:
        group_columns = [key for key in output if group_name in key]
        return any(self.is_present(output[col]) for col in group_columns)

    def is_present(self, value: Optional[str]) -> bool:
        """A cell counts as a measurement unless empty or a missing token"""
        return bool(value) and value not in self.missing_tokens

    @staticmethod
    def matching_columns(headers: Iterable[str], group_name: str) -> List[str]:
        """Distinct headers containing the group name, in header order"""
        return [col for col in dict.fromkeys(headers) if group_name in col]


def get_sample_filter() -> SampleFilter:
    """Get sample filter instance"""
    return SampleFilter()
