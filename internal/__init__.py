from internal.logging import LogLevel, StructuredLogger, get_logger
from internal.health import CheckResult, HealthChecker, Status

__all__ = [
    "LogLevel",
    "StructuredLogger",
    "get_logger",
    "CheckResult",
    "HealthChecker",
    "Status",
]
