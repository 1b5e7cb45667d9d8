"""
Configuration management for git-heatmap.

Loads the optional fallback terminal width from the environment or a .env file.
"""

import os
from dotenv import load_dotenv

# Load .env file from the working directory
load_dotenv()

HEATMAP_FALLBACK_WIDTH = os.getenv("HEATMAP_FALLBACK_WIDTH", "80")


def validate_config():
    """Validate optional configuration values."""
    if not HEATMAP_FALLBACK_WIDTH.isdigit() or int(HEATMAP_FALLBACK_WIDTH) < 1:
        raise ValueError(
            f"Invalid HEATMAP_FALLBACK_WIDTH: '{HEATMAP_FALLBACK_WIDTH}'\n"
            "It must be a positive number of terminal columns."
        )


def fallback_width() -> int:
    """Terminal width to assume when the real width cannot be determined."""
    validate_config()
    return int(HEATMAP_FALLBACK_WIDTH)
