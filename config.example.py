# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use:
- .env (local, gitignored)
- config_local.py (local simple switches, gitignored)

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "DAYPLAN_APP_NAME": "App display name (default: dayplan).",
    "DAYPLAN_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    "DAYPLAN_DATA_DIR": "Local data directory for dayplan.log (default: .local/dayplan).",
    # Console / demo
    "DAYPLAN_CONSOLE_ENABLED": "Run the interactive console (true/false, default: true).",
    "DAYPLAN_RUN_DEMO": "Replay the sample day at start-up (true/false, default: false).",
    # Subscribers
    "DAYPLAN_SUBSCRIBERS": "Comma/space separated console subscriber ids (default: UserA Logger).",
    "DAYPLAN_LOG_NOTIFICATIONS": "Also send notifications to the log (true/false, default: true).",
}
