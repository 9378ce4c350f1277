"""lff — recursively find large files."""

__all__ = [
    "__version__",
    "find_files",
    "FilterConfig",
    "SortMethod",
    "FileRecord",
    "ScanResult",
    "LffError",
    "PathError",
    "GlobCompileError",
]
__version__ = "0.3.0"

from lff.api import find_files  # noqa: E402, F401
from lff.core.config import FilterConfig  # noqa: E402, F401
from lff.core.errors import GlobCompileError, LffError, PathError  # noqa: E402, F401
from lff.model import SortMethod  # noqa: E402, F401
from lff.model.file_record import FileRecord  # noqa: E402, F401
from lff.model.scan_result import ScanResult  # noqa: E402, F401
