import pytest

freeze_time = pytest.importorskip("freezegun").freeze_time

from tracker.pipeline.io import format_log_entry, save_log, trim_log_by_time


@freeze_time("2026-02-15 12:00:00")
def test_trim_log_by_time_keeps_recent_entries(tmp_path):
    log_path = tmp_path / "tours-log.txt"
    log_path.write_text(
        "[2026-01-01 08:00:00] [INFO] old run\n"
        "old continuation\n"
        "[2026-02-10 09:30:00] [WARNING] recent run\n"
        "recent continuation\n"
    )

    kept = trim_log_by_time(log_path, retention_days=14)

    assert kept == [
        "[2026-02-10 09:30:00] [WARNING] recent run\n",
        "recent continuation\n",
    ]


def test_trim_log_by_time_missing_file(tmp_path):
    assert trim_log_by_time(tmp_path / "missing.txt") == []


@freeze_time("2026-02-15 12:00:00")
def test_format_log_entry():
    assert format_log_entry("Loaded", "WARNING") == "[2026-02-15 12:00:00] [WARNING] Loaded"


@freeze_time("2026-02-15 12:00:00")
def test_save_log_appends_new_run(tmp_path):
    log_path = tmp_path / "logs" / "tours-log.txt"
    save_log([format_log_entry("first")], log_path=log_path, retention_days=14)
    save_log([format_log_entry("second")], log_path=log_path, retention_days=14)

    content = log_path.read_text()
    assert content.count("--- New Run ---") == 2
    assert "[2026-02-15 12:00:00] [INFO] first" in content
    assert content.rstrip().endswith("[INFO] second")


@freeze_time("2026-02-15 12:00:00")
def test_trim_log_by_time_drops_expired_run_with_its_separator(tmp_path):
    log_path = tmp_path / "tours-log.txt"
    log_path.write_text(
        "\n--- New Run ---\n"
        "[2026-01-01 08:00:00] [INFO] Loading artists\n"
        "\n--- New Run ---\n"
        "[2026-02-14 08:00:00] [INFO] Loading artists\n"
        "[2026-02-14 08:00:01] [INFO] \n"
        "[2026-02-14 08:00:02] [WARNING] Warning: failed to load artists view\n"
        "not a log entry\n"
    )

    kept = trim_log_by_time(log_path, retention_days=14)

    assert kept == [
        "\n",
        "--- New Run ---\n",
        "[2026-02-14 08:00:00] [INFO] Loading artists\n",
        "[2026-02-14 08:00:01] [INFO] \n",
        "[2026-02-14 08:00:02] [WARNING] Warning: failed to load artists view\n",
        "not a log entry\n",
    ]


@freeze_time("2026-02-15 12:00:00")
def test_trim_log_by_time_ignores_lines_in_other_formats(tmp_path):
    log_path = tmp_path / "tours-log.txt"
    log_path.write_text(
        "[2026-02-14 08:00:00] recent but missing a level\n"
        "[2026-13-40 08:00:00] [INFO] impossible timestamp\n"
    )

    assert trim_log_by_time(log_path, retention_days=14) == []
