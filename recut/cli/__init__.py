"""
Command-line interface for recut.
"""

import logging

__all__ = ['COMMANDS']

COMMANDS = {
    'fragments': 'Cut a sequence and list the resulting fragments',
    'display': 'Show both strands with their cut positions',
}

# Logger for CLI operations
logger = logging.getLogger("recut.cli")
