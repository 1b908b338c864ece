"""Automatic log capture and rotation for inventory commands.

Captures all terminal output (stdout/stderr) to timestamped log files
with automatic rotation (keeps newest 10 logs).

Usage:
    from inventory.log_manager import LogCapture

    with LogCapture() as log:
        run_command()

    # Log file automatically saved and rotated
"""

import platform
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional, TextIO

from inventory.env_config import LOG_DIR


class TeeWriter:
    """Write to multiple streams simultaneously (tee-like behavior).

    If writing to one stream fails, continues with the others. The first
    stream (typically stdout/stderr) is always written first.
    """

    def __init__(self, *streams: TextIO):
        self.streams = streams

    def write(self, data: str) -> None:
        if not isinstance(data, str):
            data = str(data)

        for stream in self.streams:
            try:
                stream.write(data)
                stream.flush()
            except (OSError, ValueError):
                continue

    def flush(self) -> None:
        for stream in self.streams:
            try:
                stream.flush()
            except (OSError, ValueError):
                continue

    def isatty(self) -> bool:
        """Delegate to the first stream."""
        if self.streams:
            try:
                return self.streams[0].isatty()
            except (AttributeError, OSError, ValueError):
                return False
        return False


class LogCapture:
    """Context manager for capturing terminal output to log files.

    Automatically:
    - Captures stdout and stderr
    - Displays output to terminal (tee behavior)
    - Saves to timestamped log file
    - Rotates logs (keeps newest max_logs)

    If log setup fails (permissions, disk space), capture is disabled and
    the wrapped code runs normally.

    Attributes:
        log_dir: Directory where logs are stored (default: LOG_DIR)
        max_logs: Maximum number of logs to keep (default: 10)
    """

    def __init__(self, log_dir: Path = None, max_logs: int = 10, label: str = "inventory"):
        self.log_dir = Path(log_dir or LOG_DIR)
        self.max_logs = max(1, min(max_logs, 100))
        self.label = label
        self.log_file: Optional[Path] = None
        self.log_handle: Optional[TextIO] = None
        self._logging_enabled = False

        self._original_stdout = sys.stdout if sys.stdout is not None else sys.__stdout__
        self._original_stderr = sys.stderr if sys.stderr is not None else sys.__stderr__

    def __enter__(self):
        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            self.log_file = self._generate_log_filename()
            self.log_handle = open(self.log_file, 'w', encoding='utf-8')
            self._write_log_header()

            sys.stdout = TeeWriter(self._original_stdout, self.log_handle)
            sys.stderr = TeeWriter(self._original_stderr, self.log_handle)

            self._logging_enabled = True

        except OSError:
            self._logging_enabled = False
            if self.log_handle:
                self.log_handle.close()
            self.log_handle = None
            self.log_file = None

        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Restore stdout/stderr and finalize the log file.

        Never suppresses the wrapped code's exception.
        """
        sys.stdout = self._original_stdout
        sys.stderr = self._original_stderr

        if self._logging_enabled and self.log_handle:
            try:
                if exc_type is not None and exc_type is not SystemExit:
                    self.log_handle.write(f"\n{'='*80}\n")
                    self.log_handle.write(f"FATAL ERROR: {exc_type.__name__}: {exc_val}\n")
                    self.log_handle.write(f"{'='*80}\n")
            except OSError as e:
                print(f"Warning: could not finalize log {self.log_file}: {e}", file=self._original_stderr)
            finally:
                self.log_handle.close()

            try:
                self._rotate_logs()
            except OSError as e:
                print(f"Warning: log rotation failed: {e}", file=self._original_stderr)

        return False

    def _generate_log_filename(self) -> Path:
        """Generate timestamped log filename.

        Format: YYYYMMDD_HHMMSS_microseconds_<osname>_<label>.log
        Example: 20260119_143022_123456_linux_inventory.log
        """
        now = datetime.now()
        timestamp = now.strftime("%Y%m%d_%H%M%S")
        microseconds = f"{now.microsecond:06d}"
        os_name = platform.system().lower() or "unknown"

        filename = f"{timestamp}_{microseconds}_{os_name}_{self.label}.log"
        return self.log_dir / filename

    def _write_log_header(self) -> None:
        """Write metadata header to log file."""
        command_str = ' '.join(str(arg) for arg in sys.argv)

        header = f"""{'='*80}
Inventory Log
{'='*80}
Timestamp:       {datetime.now().strftime("%Y-%m-%d %H:%M:%S")}
Python Version:  {sys.version.split()[0]}
Platform:        {platform.platform()}
Command:         {command_str}
{'='*80}

"""
        self.log_handle.write(header)
        self.log_handle.flush()

    def _rotate_logs(self) -> None:
        """Keep only the newest max_logs log files."""
        for old_log in get_recent_logs(self.log_dir, count=None)[self.max_logs:]:
            old_log.unlink()

    def get_log_path(self) -> Optional[Path]:
        """Get path to current log file, or None if not capturing."""
        return self.log_file


def get_recent_logs(log_dir: Path = None, count: Optional[int] = 10) -> List[Path]:
    """Get list of recent log files, newest first.

    Args:
        log_dir: Directory containing logs (default: LOG_DIR)
        count: Number of recent logs to return (None for all)
    """
    log_dir = Path(log_dir or LOG_DIR)
    if not log_dir.exists():
        return []

    log_files = sorted(
        log_dir.glob("*.log"),
        key=lambda p: (p.stat().st_mtime, p.name),
        reverse=True
    )

    return log_files if count is None else log_files[:count]
