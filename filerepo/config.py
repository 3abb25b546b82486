"""
Environment-driven defaults. CLI flags take precedence over these.
"""

import os

DATA_DIR: str = os.environ.get("FILEREPO_DATA_DIR", "data")
LOG_LEVEL: str = os.environ.get("FILEREPO_LOG_LEVEL", "INFO")
