# defaults.py
"""Default values for starting the finder."""

import os

LOG_LEVEL = "WARNING"
LOG_LEVEL_ENV_VAR = "SYMLINK_FINDER_LOG_LEVEL"
N_WORKERS = os.cpu_count() or 1
