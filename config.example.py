# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Variables already set in the environment win over .env.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "NOLEARN_APP_NAME": "Title shown in the banner (default: Nolearn).",
    "NOLEARN_LOG_LEVEL": "Console (stderr) logging level (default: WARNING).",
    "NOLEARN_LOG_DIR": "Directory for nolearn.log (default: .local/nolearn).",
    "NOLEARN_FILE_LOGGING": "Write the debug log file (true/false, default: true).",
    # Storage
    "NOLEARN_TASKS_PATH": "Task file used when no path is given on the command line (default: tasks.json).",
    # Terminal
    "NOLEARN_CLEAR_COMMAND": "Command that clears the screen (default: clear, or cls on Windows).",
}
