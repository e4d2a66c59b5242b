#!/usr/bin/env python3
"""Constants for reconnect configuration.

These constants control the exponential backoff behavior when the
connection to sway is lost and --reconnect is in effect.
"""

# Initial delay between connection attempts in seconds.
INITIAL_WAIT: float = 0.5

# Maximum delay between connection attempts in seconds.
MAX_WAIT: float = 30.0

# Multiplier for exponential backoff (delay = initial * multiplier^attempt).
WAIT_MULTIPLIER: float = 2.0
