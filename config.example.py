# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKPAD_APP_NAME": "App display name (default: taskpad).",
    "TASKPAD_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKPAD_LOG_TO_FILE": "Also write full DEBUG logs to <data_dir>/taskpad.log (default: true).",
    # Paths
    "TASKPAD_DATA_DIR": "Local data directory (default: .local/taskpad).",
    "TASKPAD_KV_DB_PATH": "SQLite key-value store file (default: <data_dir>/store.sqlite3).",
    # Task persistence
    "TASKPAD_TASKS_KEY": "Key the task list is stored under (default: tasks).",
}
