import asyncio
import psutil


_process = psutil.Process()

CPU_SAMPLE_SECONDS = 0.5



async def current_cpu_percent(interval: float = CPU_SAMPLE_SECONDS) -> float:

    """
    Measures this process's CPU usage as a share of the whole machine.

    psutil blocks for the sampling interval, so the measurement runs in a worker
    thread and the event loop keeps serving other handlers meanwhile. The raw
    per-process value is summed across cores and is normalised by the logical
    CPU count.

    Args:
        interval (float): Sampling window in seconds.

    Returns:
        float: CPU usage in percent, between 0 and 100.
    """

    usage = await asyncio.to_thread(_process.cpu_percent, interval)
    return usage / (psutil.cpu_count() or 1)


def current_ram_percent() -> float:
    """Resident memory of this process as a percentage of total physical memory."""
    return _process.memory_percent()


def format_performance(cpu: float, ram: float) -> str:
    return f"CPU: {cpu:.1f}% | RAM: {ram:.1f}%"
