"""
Configuration constants for graphwalk.

All capacities, defaults, and logging settings are defined here.
Each capacity can be overridden from the environment (or a .env file).
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    """Read a positive integer override from the environment."""
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    value = int(raw)
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


# =============================================================================
# Adjacency-List Graph / BFS Configuration
# =============================================================================

# Largest vertex count accepted by create_graph()
MAX_LIST_VERTICES = _env_int("GRAPHWALK_MAX_LIST_VERTICES", 40)

# Bounded queue capacity used by BFS (matches the vertex maximum)
DEFAULT_QUEUE_CAPACITY = _env_int("GRAPHWALK_QUEUE_CAPACITY", MAX_LIST_VERTICES)

# =============================================================================
# Adjacency-Matrix Graph / DFS Configuration
# =============================================================================

# Size of the vertex table and adjacency matrix
MAX_MATRIX_VERTICES = _env_int("GRAPHWALK_MAX_MATRIX_VERTICES", 5)

# Bounded stack capacity used by DFS
DEFAULT_STACK_CAPACITY = _env_int("GRAPHWALK_STACK_CAPACITY", MAX_MATRIX_VERTICES)

# DFS starts here unless told otherwise
DFS_DEFAULT_START = 0

# =============================================================================
# Bounded Structure Configuration
# =============================================================================

# Returned by try_dequeue()/try_pop() on an empty structure
UNDERFLOW_SENTINEL = -1

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("GRAPHWALK_LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def configure_logging(verbose: bool = False) -> int:
    """Set up root logging for scripts and return the level applied."""
    level = logging.DEBUG if verbose else getattr(logging, LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    # basicConfig leaves the level alone when handlers already exist
    logging.getLogger().setLevel(level)
    return level
