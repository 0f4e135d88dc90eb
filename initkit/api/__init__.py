"""initkit API - configuration and service lifecycle commands."""
