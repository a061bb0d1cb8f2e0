# config_local.example.py

"""
Copy to config_local.py (gitignored) for simple local switches.

Only the names below are read; everything else belongs in .env.
"""

CONSOLE_ENABLED = True
RUN_DEMO = True
