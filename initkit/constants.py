"""Shared constants for initkit result labels and artefact locations."""

INITKIT_HOME_EXT = ".initkit"  # user-level state/config directory suffix

INITKIT_HOME_DISPLAY = f"~/{INITKIT_HOME_EXT}"

# Result labels for failed lifecycle operations
UPDATE_FAILED = "Failed to update"
START_FAILED = "Failed to start"
INSTALL_FAILED = "Failed to install"
STOP_FAILED = "Failed to stop"
REMOVE_FAILED = "Failed to remove"
RESTART_FAILED = "Failed to restart"

# Result labels for successful lifecycle operations and status
UNDEFINED = "undefined"
RUNNING = "running"
STOPPED = "stopped"
REMOVED = "removed"
INSTALLED = "installed"
STARTED = "started"
RESTARTED = "restarted"
UPDATED = "updated"

# Returned by pid queries when no process can be determined
NO_PID = -1

# Placeholder pid when a backend reports running but prints no pid
UNKNOWN_PID = 0

# Reserved service name that gets the native procd (rc.common) script
PROCD_AGENT_NAME = "initkit-agent"

# Delay between stop and start for backends without a native restart
RESTART_DELAY_SECONDS = 0.05
