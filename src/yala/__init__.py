from yala.logger import (
    Adapter,
    Entry,
    Field,
    Level,
    Local,
    Logger,
    NopAdapter,
    debug,
    error,
    get_adapter,
    info,
    set_adapter,
    warn,
    with_error,
    with_field,
)

__all__ = [
    "Adapter",
    "NopAdapter",
    "Entry",
    "Field",
    "Level",
    "Local",
    "Logger",
    "debug",
    "info",
    "warn",
    "error",
    "with_field",
    "with_error",
    "set_adapter",
    "get_adapter",
]
