import json
import re
from datetime import datetime, timedelta, timezone

from tracker import config

LOG_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_ENTRY_RE = re.compile(r"\[(?P<timestamp>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})\] \[(?P<level>[A-Z]+)\] ")
RUN_SEPARATOR = "--- New Run ---"


def format_log_entry(message, level="INFO"):
    """One log line: "[2026-02-15 12:00:00] [WARNING] message", timestamp in UTC."""
    timestamp = datetime.now(timezone.utc).strftime(LOG_TIMESTAMP_FORMAT)
    return f"[{timestamp}] [{level}] {message}"


def _entry_time(match):
    try:
        return datetime.strptime(match.group("timestamp"), LOG_TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError:
        return None


def trim_log_by_time(log_path, retention_days=14):
    """
    Drop entries written by format_log_entry more than retention_days ago.
    - Lines that are not entries (multi-line messages) follow the entry above
    - Blank lines and run separators go with the run below them
    Returns list of lines to keep.
    """
    if not log_path.exists():
        return []

    cutoff = datetime.now(timezone.utc) - timedelta(days=retention_days)

    kept_lines = []
    pending = []
    keep = False

    with open(log_path, "r") as f:
        for line in f:
            if not line.strip() or line.strip() == RUN_SEPARATOR:
                pending.append(line)
                continue

            match = LOG_ENTRY_RE.match(line)
            if match:
                entry_time = _entry_time(match)
                keep = entry_time is not None and entry_time >= cutoff

            if keep:
                kept_lines.extend(pending)
                kept_lines.append(line)
            pending = []

    return kept_lines


def save_log(log_lines, log_path=None, retention_days=None):
    """Append this run's log lines to the log file, dropping expired entries."""
    log_path = log_path or config.LOG_PATH
    if retention_days is None:
        retention_days = config.LOG_RETENTION_DAYS

    existing_log = trim_log_by_time(log_path, retention_days=retention_days)
    log_content = existing_log + ["\n", RUN_SEPARATOR + "\n"] + [line + "\n" for line in log_lines]

    log_path.parent.mkdir(parents=True, exist_ok=True)
    with open(log_path, "w") as f:
        f.writelines(log_content)


def save_page(page, output_path=None):
    """Write a page (anything with to_dict) as JSON."""
    output_path = output_path or config.OUTPUT_PATH
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(page.to_dict(), f, indent=2, ensure_ascii=False)
    return output_path
