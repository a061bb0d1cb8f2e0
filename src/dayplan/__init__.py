"""
dayplan: a one-day schedule manager with conflict checks and subscriber notifications.
"""
