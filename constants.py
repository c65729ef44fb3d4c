"""
Global constants used throughout the project
"""

import logging

from localtypes import TraversalModes

LOG_FORMAT = "%(levelname)s | %(message)s"
DEFAULT_LOG_LEVEL = logging.INFO

DEFAULT_TRAVERSAL_MODE = TraversalModes.BFS
