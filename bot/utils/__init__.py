from .stats import current_cpu_percent, current_ram_percent, format_performance
from .status import StatusCycle, StatusRotator, is_connected, start_status_task

__all__ = [
    "current_cpu_percent",
    "current_ram_percent",
    "format_performance",
    "start_status_task",
    "StatusRotator",
    "is_connected",
    "StatusCycle",
]
