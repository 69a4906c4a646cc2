# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Keep your .env local (gitignored); nothing here is read at runtime.

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "CAPTAIN_APP_NAME": "App display name used in log lines (default: Captain Barry).",
    "CAPTAIN_LOG_LEVEL": "Console logging level (default: WARNING).",
    "CAPTAIN_FILE_LOGGING": "Also write full DEBUG logs to <log_dir>/captain.log (true/false, default: true).",
    # Paths (gitignored)
    "CAPTAIN_DATA_DIR": "Local data directory (default: .local/captain).",
    "CAPTAIN_TASKS_FILE": "Task save file (default: <data_dir>/tasks.txt).",
    "CAPTAIN_LOG_DIR": "Directory for captain.log (default: <data_dir>).",
    # Formatting
    "CAPTAIN_DISPLAY_DATETIME_FORMAT": (
        "strftime pattern used when showing dates (default: %b %d %Y %H:%M). "
        "Input and the save file always use yyyy-MM-dd HHmm."
    ),
}
