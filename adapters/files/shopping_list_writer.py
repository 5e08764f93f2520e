"""
Writes rendered shopping lists to text files.
"""

import logging
from pathlib import Path
from typing import Iterable, Union

from config import settings
from domain.exceptions import StorageError

logger = logging.getLogger(__name__)


class ShoppingListWriter:
    """Writes one shopping list entry per line."""

    def __init__(self, encoding: str = None):
        self.encoding = encoding or settings.shopping_list_encoding

    def write(self, filename: Union[str, Path], lines: Iterable[str]) -> Path:
        """Write newline-terminated lines to filename.

        Raises:
            StorageError: if the file cannot be written
        """
        path = Path(filename)
        content = "".join(f"{line}\n" for line in lines)
        try:
            path.write_text(content, encoding=self.encoding)
        except OSError as e:
            logger.error(f"Error writing shopping list to {path}: {e}")
            raise StorageError(f"Cannot write {path}: {e}")
        logger.info(f"Wrote shopping list to {path}")
        return path
