"""Font Manager Module

Loads a user-supplied font file, reads its name table and resolves a usable
display name for embedding.
"""
import hashlib
import logging
import os
from dataclasses import dataclass
from io import BytesIO
from typing import Any, Dict, Mapping, Optional

from fontTools.ttLib import TTFont

from ..config import FONT_STYLE, MAX_FONT_FILE_SIZE_MB, UNKNOWN_FONT_NAME
from ..exceptions import FileSizeLimitExceededError, FontParseError, FontReadError

logger = logging.getLogger(__name__)

# Platforms in the order their names are preferred
PLATFORM_PRIORITY = ("unicode", "windows", "macintosh")

PLATFORM_NAMES = {
    0: "unicode",
    1: "macintosh",
    3: "windows",
}

# name table IDs
NAME_ID_FONT_FAMILY = 1
NAME_ID_FULL_NAME = 4

NAME_KEYS = {
    NAME_ID_FONT_FAMILY: "fontFamily",
    NAME_ID_FULL_NAME: "fullName",
}

# Language tags for the common language IDs; the unicode platform shares the
# Macintosh language codes
MAC_LANGUAGE_TAGS = {
    0: "en",
    1: "fr",
    2: "de",
    11: "ja",
    19: "zh-Hant",
    23: "ko",
    33: "zh-Hans",
}

WINDOWS_LANGUAGE_TAGS = {
    0x0404: "zh-Hant",
    0x0407: "de",
    0x0409: "en",
    0x040C: "fr",
    0x0411: "ja",
    0x0412: "ko",
    0x0804: "zh-Hans",
}


@dataclass(frozen=True)
class FontDescriptor:
    """Resolved identity of the font to embed.

    Attributes:
        data: Raw font file bytes
        source_name: File name the font was loaded from (used in messages)
        display_name: Name resolved from the font's name table
        style: Font style tag (always "normal")
    """

    data: bytes
    source_name: str
    display_name: str
    style: str = FONT_STYLE

    @property
    def font_id(self) -> str:
        """Registration key unique to these font bytes.

        The renderer's font registry is process-wide, so two different files
        that resolve to the same display name must not share a key.
        """
        digest = hashlib.sha1(self.data).hexdigest()[:8]
        return f"{self.display_name}-{digest}"


def _language_tag(platform_id: int, lang_id: int) -> str:
    if platform_id == 3:
        tag = WINDOWS_LANGUAGE_TAGS.get(lang_id)
    else:
        tag = MAC_LANGUAGE_TAGS.get(lang_id)
    return tag or f"{PLATFORM_NAMES[platform_id]}-{lang_id:#06x}"


def resolve_font_name(names: Optional[Mapping[str, Any]], source_name: str = "<font>") -> str:
    """
    Derive a display name from parsed font names.

    Resolution order:
    1. The first platform table present out of unicode, windows, macintosh;
       if none, the ``names`` mapping itself is treated as the table
    2. ``fullName``, or ``fontFamily`` if there is no full name
    3. The value for the first language key, in the mapping's own order

    Missing pieces never raise. A warning naming ``source_name`` is logged
    and UNKNOWN_FONT_NAME is returned instead.

    Args:
        names: Names structure as returned by FontManager.parse_font_names
        source_name: File name used in warnings

    Returns:
        Non-empty font name

    Examples:
        >>> resolve_font_name({"macintosh": {"fontFamily": {"en": "Foo"}}})
        'Foo'
        >>> resolve_font_name({"fullName": {"en": "Bar"}})
        'Bar'
    """
    if not isinstance(names, Mapping):
        logger.warning(f"font {source_name} does not have a valid names table")
        return UNKNOWN_FONT_NAME

    # We only care that some platform gives us a name
    table = names
    for platform in PLATFORM_PRIORITY:
        if names.get(platform) is not None:
            table = names[platform]
            break

    if not isinstance(table, Mapping):
        logger.warning(f"font {source_name} has a malformed names table")
        return UNKNOWN_FONT_NAME

    # Full name is preferred but font family will serve if it's not available
    name_set = table.get("fullName")
    if name_set is None:
        name_set = table.get("fontFamily")
    if name_set is None:
        logger.warning(f"font {source_name} has no full name or font family name")
        return UNKNOWN_FONT_NAME

    if not isinstance(name_set, Mapping):
        logger.warning(f"font {source_name} has malformed name records")
        return UNKNOWN_FONT_NAME

    languages = list(name_set)
    if not languages:
        logger.warning(f"font {source_name} has no languages for names")
        return UNKNOWN_FONT_NAME

    name = name_set[languages[0]]
    if not isinstance(name, str) or not name.strip():
        logger.warning(f"font {source_name} has an empty name for language '{languages[0]}'")
        return UNKNOWN_FONT_NAME

    return name


class FontManager:
    """Reads font files and resolves their names.

    Attributes:
        max_file_size_mb: Largest font file accepted
    """

    def __init__(self, max_file_size_mb: float = MAX_FONT_FILE_SIZE_MB):
        self.max_file_size_mb = max_file_size_mb

    def read_font_file(self, font_path: str) -> bytes:
        """
        Read the whole font file into memory.

        Args:
            font_path: Path to the font file

        Returns:
            File contents

        Raises:
            FontReadError: If the file is missing, unreadable or empty
            FileSizeLimitExceededError: If the file is larger than max_file_size_mb
        """
        try:
            with open(font_path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise FontReadError(font_path, e.strerror or str(e)) from e

        if not data:
            raise FontReadError(font_path, "file is empty")

        size_mb = len(data) / (1024 * 1024)
        if size_mb > self.max_file_size_mb:
            raise FileSizeLimitExceededError(size_mb, self.max_file_size_mb)

        logger.debug(f"Read {len(data)} bytes from {font_path}")
        return data

    def parse_font_names(self, data: bytes, source_name: str) -> Optional[Dict[str, Dict[str, Dict[str, str]]]]:
        """
        Extract full and family names from the font's name table.

        Args:
            data: Raw font bytes
            source_name: File name used in error messages

        Returns:
            ``{platform: {"fullName": {lang: name}, "fontFamily": {lang: name}}}``
            with platforms and languages in name-record order, or None if the
            font has no name table

        Raises:
            FontParseError: If the bytes are not a readable font
        """
        try:
            # lazy=True only decompiles the tables we touch
            with TTFont(BytesIO(data), lazy=True) as font:
                if "name" not in font:
                    return None
                records = list(font["name"].names)
        except Exception as e:
            raise FontParseError(source_name, str(e)) from e

        names: Dict[str, Dict[str, Dict[str, str]]] = {}
        for record in records:
            key = NAME_KEYS.get(record.nameID)
            platform = PLATFORM_NAMES.get(record.platformID)
            if key is None or platform is None:
                continue

            try:
                value = record.toUnicode()
            except UnicodeDecodeError:
                logger.debug(
                    f"Skipping undecodable name record {record.nameID} "
                    f"(platform {record.platformID}) in {source_name}"
                )
                continue

            lang = _language_tag(record.platformID, record.langID)
            names.setdefault(platform, {}).setdefault(key, {}).setdefault(lang, value)

        return names

    def load(self, font_path: str, source_name: Optional[str] = None) -> FontDescriptor:
        """
        Read, parse and name a font file.

        Args:
            font_path: Path to the font file
            source_name: Name to report in messages; defaults to the file's base name
                (uploads are often stored under temporary names)

        Returns:
            FontDescriptor ready for registration

        Raises:
            FontReadError, FileSizeLimitExceededError, FontParseError
        """
        source_name = source_name or os.path.basename(font_path)

        data = self.read_font_file(font_path)
        names = self.parse_font_names(data, source_name)
        display_name = resolve_font_name(names, source_name)

        logger.info(f"Loaded font {source_name} as '{display_name}'")
        return FontDescriptor(data=data, source_name=source_name, display_name=display_name)
