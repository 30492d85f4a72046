# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TODO_LOG_TO_FILE": "Write full DEBUG logs to <data_dir>/todo.log (true/false, default: true).",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory (default: .local/todo).",
    "TODO_STORAGE_PATH": "Key-value SQLite path (default: <data_dir>/storage.sqlite3).",
    # Storage keys
    "TODO_TASKS_KEY": "Key holding the serialized task list (default: todos).",
    "TODO_THEME_KEY": "Key holding the theme preference (default: theme).",
    # Theme
    "TODO_DEFAULT_THEME": "Theme used until one is saved: light or dark (default: light).",
}
