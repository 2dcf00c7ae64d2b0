"""
Input/Output Manager
Reads sample text from data files and writes generated scripts.
"""
import logging
import os

# Get module logger
logger = logging.getLogger(__name__)


class IOManager:

    @staticmethod
    def read_input(filepath: str) -> str:
        """
        Read a whitespace separated data file as text.

        Raises:
            OSError: The file cannot be opened.
            UnicodeDecodeError: The file is not UTF-8 text.
        """
        logger.info(f"Loading input data from: {filepath}")
        try:
            # utf-8-sig strips the BOM spreadsheet exports put in front
            with open(filepath, "r", encoding="utf-8-sig") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read input data: {e}")
            raise
        logger.debug(f"Read {len(text)} characters from '{os.path.basename(filepath)}'.")
        return text

    @staticmethod
    def write_script(script: str, filepath: str) -> None:
        """Write a generated APDL script, replacing the file if it exists."""
        logger.info(f"Exporting APDL script to: {filepath}")
        try:
            with open(filepath, "w", encoding="utf-8", newline="\n") as f:
                f.write(script)
        except OSError as e:
            logger.error(f"Failed to export APDL script: {e}")
            raise
