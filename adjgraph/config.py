"""
Configuration constants for adjgraph.

Tunable parameters are defined here. Values that may differ between
environments are read from environment variables (a local .env file is
honoured).
"""

import os

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# Format used by scripts that configure logging
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# =============================================================================
# Display Configuration
# =============================================================================

# Nodes rendered by format_graph() before the listing is truncated
DISPLAY_MAX_NODES = int(os.environ.get("ADJGRAPH_DISPLAY_MAX_NODES", "50"))

# =============================================================================
# Shortest Path Configuration
# =============================================================================

# Additive identity used for path costs when the caller does not supply one
DEFAULT_ZERO_COST = 0
