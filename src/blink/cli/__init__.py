"""
BLINK CLI Package.

- app.py: main application and entry point
- plan.py: normalize, industries, resolve and plan commands
- variants.py: variant matrix and key codec commands
- utils.py: shared utilities
"""

from blink.cli.app import app, main
from blink.cli.utils import get_version, version_callback

__all__ = [
    "app",
    "main",
    "get_version",
    "version_callback",
]
