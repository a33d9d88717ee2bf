"""
Adapter implementations:
- printer: logfmt lines to any printer callable (stdout/stderr helpers)
- stdlib: standard library ``logging``
- structlog_adapter: structlog bound loggers
"""

from .printer import PrinterAdapter, WriterPrinter, stderr_adapter, stdout_adapter
from .stdlib import StdlibAdapter
from .structlog_adapter import StructlogAdapter

__all__ = [
    "PrinterAdapter",
    "WriterPrinter",
    "StdlibAdapter",
    "StructlogAdapter",
    "stdout_adapter",
    "stderr_adapter",
]
