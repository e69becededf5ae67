"""Utilities Module

Helper functions for validating inputs and preparing character sequences.
"""
import os
import re
import unicodedata
from typing import List, Optional

from .config import MAX_FONT_FILE_SIZE_MB, SUPPORTED_FONT_EXTENSIONS
from .exceptions import InvalidFileError, FileSizeLimitExceededError


def validate_font_path(font_path: str, display_name: Optional[str] = None) -> None:
    """
    Validate font file exists and has a supported extension.

    Args:
        font_path: Path to font file
        display_name: Name to check the extension of, if the file on disk was
            renamed (e.g. a temporary upload)

    Raises:
        InvalidFileError: If file doesn't exist or has wrong extension
    """
    if not font_path:
        raise InvalidFileError("Font path cannot be empty")

    if not os.path.isfile(font_path):
        raise InvalidFileError(f"File does not exist: {font_path}")

    name = display_name or font_path
    if not name.lower().endswith(SUPPORTED_FONT_EXTENSIONS):
        raise InvalidFileError(
            f"File must have one of the extensions {', '.join(SUPPORTED_FONT_EXTENSIONS)}: {name}"
        )


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted string (e.g., "45.3 KB")
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def clean_filename(filename: str) -> str:
    """
    Clean filename for safe saving.

    Args:
        filename: Original filename

    Returns:
        Cleaned filename without extension
    """
    filename = os.path.basename(filename)
    name, _ = os.path.splitext(filename)

    name = re.sub(r'[^\w\s-]', '', name)
    name = re.sub(r'\s+', '_', name)

    if len(name) > 50:
        name = name[:50]

    return name or 'worksheet'


def check_file_size_limit(file_path: str, max_mb: float = MAX_FONT_FILE_SIZE_MB) -> float:
    """
    Check if file is within size limit.

    Args:
        file_path: Path to file
        max_mb: Maximum size in MB

    Returns:
        File size in MB

    Raises:
        FileSizeLimitExceededError: If file exceeds size limit
        InvalidFileError: If file size cannot be determined
    """
    try:
        size_bytes = os.path.getsize(file_path)
    except OSError as e:
        raise InvalidFileError(f"Error checking file size: {str(e)}")

    size_mb = size_bytes / (1024 * 1024)
    if size_mb > max_mb:
        raise FileSizeLimitExceededError(size_mb, max_mb)

    return size_mb


def split_characters(text: str) -> List[str]:
    """
    Split free text into the characters to practice.

    Text is NFC-normalized, whitespace is dropped and combining marks stay
    attached to the character before them.

    Args:
        text: Characters as typed by the user

    Returns:
        List of single characters (each possibly with combining marks)

    Examples:
        >>> split_characters("あ い\\nう")
        ['あ', 'い', 'う']
    """
    characters: List[str] = []
    for ch in unicodedata.normalize("NFC", text or ""):
        if ch.isspace():
            continue
        if unicodedata.combining(ch) and characters:
            characters[-1] += ch
        else:
            characters.append(ch)
    return characters
