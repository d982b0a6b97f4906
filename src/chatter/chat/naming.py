# ABOUTME: File naming policy for chat log files
# ABOUTME: Builds chatter-<base>-<YYYYMMDD>-<HHMMSS>.log paths and avoids reusing existing files

from datetime import datetime, timedelta
from pathlib import Path

FILE_PREFIX = "chatter"
FILE_EXTENSION = ".log"


def log_file_path(base_name: str, directory: Path, timestamp: datetime) -> Path:
    """
    Compute the log file path for a chat log started at the given time.

    Args:
        base_name: The log's file base name
        directory: The output directory, used as is
        timestamp: The log start time

    Returns:
        <directory>/chatter-<base_name>-<YYYYMMDD>-<HHMMSS>.log
    """
    stamp = timestamp.strftime("%Y%m%d-%H%M%S")
    return Path(directory) / f"{FILE_PREFIX}-{base_name}-{stamp}{FILE_EXTENSION}"


def next_free_log_file_path(
    base_name: str, directory: Path, timestamp: datetime
) -> tuple[Path, datetime]:
    """
    Find a log file path that does not exist yet.

    File names only have one second resolution, so when a log is reopened
    within the same second the start time is moved forward a second at a
    time until the name is free.

    Returns:
        The path and the start time it was computed from
    """
    path = log_file_path(base_name, directory, timestamp)
    while path.exists():
        timestamp = timestamp + timedelta(seconds=1)
        path = log_file_path(base_name, directory, timestamp)
    return path, timestamp
