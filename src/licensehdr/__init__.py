"""License header maintenance tool.

Discovers the files changed in a git working tree or ahead of a baseline
branch and resolves their copyright year ranges from commit history.
"""

__version__ = "1.0.0"
__author__ = "licensehdr developers"

__all__ = []
