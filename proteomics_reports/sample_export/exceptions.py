"""
Exceptions raised by the sample export module.
All of them are recoverable: the UI layer turns each into an error message.
"""

from typing import Optional


class SampleExportError(Exception):
    """Base class for sample export errors"""


class EmptyInputError(SampleExportError):
    """Uploaded text contains no non-blank lines"""

    def __init__(self, message: str = "File is empty"):
        super().__init__(message)


class BlankNameError(SampleExportError):
    """Sample group name is empty after trimming"""

    def __init__(self, message: str = "Please enter a sample group name"):
        super().__init__(message)


class DuplicateNameError(SampleExportError):
    """Sample group name is already registered"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"This sample group already exists: {name}")


class NoDataError(SampleExportError):
    """Export attempted without a dataset or without sample groups"""

    def __init__(self, message: str = "Please upload a file and add at least one sample group"):
        super().__init__(message)


class FileTooLargeError(SampleExportError):
    """Uploaded file exceeds the configured size limit"""

    def __init__(self, size_mb: float, max_size_mb: float):
        self.size_mb = size_mb
        self.max_size_mb = max_size_mb
        super().__init__(f"File too large: {size_mb:.2f} MB (max: {max_size_mb} MB)")


class ExportError(SampleExportError):
    """Workbook could not be built or serialized"""

    def __init__(self, cause: Optional[BaseException] = None, message: Optional[str] = None):
        self.cause = cause
        if message is None:
            message = str(cause) if cause is not None else "Export failed"
        super().__init__(message)
