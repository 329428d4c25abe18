"""
Naming interfaces module.

Contains abstract base classes defining the contracts the rename executor
depends on for file and folder names.
"""

from abc import ABC, abstractmethod

from src.core.domain.entities import NamingContext


class IFileNamer(ABC):
    """
    File namer interface.

    Implementations return a sanitized file name including its extension.
    """

    @abstractmethod
    def build_filename(self, context: NamingContext) -> str:
        """
        Build a file name for a naming context.

        Args:
            context: Naming context.

        Returns:
            Sanitized file name with extension.
        """
        pass


class IFolderNamer(ABC):
    """
    Folder namer interface.

    Implementations return a bare, sanitized folder name.
    """

    @abstractmethod
    def build_folder_name(self, context: NamingContext) -> str:
        """
        Build a folder name for a naming context.

        Args:
            context: Naming context.

        Returns:
            Sanitized folder name.
        """
        pass
