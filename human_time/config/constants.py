"""
Configuration-related constants and resource limits.
"""

import os

# Name of the file searched for by --config; override with HUMAN_TIME_CONFIG_FILE
DEFAULT_CONFIG_FILENAME: str = os.environ.get(
    "HUMAN_TIME_CONFIG_FILE", "human-time.toml"
)

# Maximum config file size (1MB)
MAX_CONFIG_SIZE_BYTES = 1024 * 1024

# Suffixes understood by load_config()
TOML_SUFFIXES = (".toml",)
YAML_SUFFIXES = (".yaml", ".yml")
