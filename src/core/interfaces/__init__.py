"""
Interfaces module.

Contains abstract base classes defining the contracts for the namers.
"""

from src.core.interfaces.naming import IFileNamer, IFolderNamer

__all__ = [
    'IFileNamer',
    'IFolderNamer',
]
