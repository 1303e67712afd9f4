"""Global configuration: traversal bounds, file names, constants."""

from pathlib import Path

# Maximum number of levels a structural condition walks up or down the tree.
# Corrupted live providers can report cycles; deeper paths count as no match.
MAX_TRAVERSAL_DEPTH = 64

# Maximum number of elements visited by a registry scan of one tree
MAX_SCAN_ELEMENTS = 20000

# Default location of the persisted event recorder settings
DEFAULT_RECORDER_CONFIG = Path("EventConfig.json")
