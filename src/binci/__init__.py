"""binci - Containerized task runner.

Translates a binci.yml container config into docker run arguments and the
execution script the container runs on startup.
"""

from __future__ import annotations

__version__ = "0.1.0"
