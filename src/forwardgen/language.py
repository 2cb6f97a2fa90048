"""C# language versions and alias parsing.

Values follow the compiler's own numeric encoding (``major * 100 + minor`` from
C# 7.1 on), so ordinary integer comparison gives language ordering.
"""

from __future__ import annotations

from enum import IntEnum
import re

from forwardgen.errors import ConfigurationError


class LanguageVersion(IntEnum):
    """Concrete C# language versions known to forwardgen."""

    CSHARP1 = 1
    CSHARP2 = 2
    CSHARP3 = 3
    CSHARP4 = 4
    CSHARP5 = 5
    CSHARP6 = 6
    CSHARP7 = 7
    CSHARP7_1 = 701
    CSHARP7_2 = 702
    CSHARP7_3 = 703
    CSHARP8 = 800
    CSHARP9 = 900
    CSHARP10 = 1000
    CSHARP11 = 1100
    CSHARP12 = 1200
    CSHARP13 = 1300
    PREVIEW = 2_147_483_646

    def __str__(self) -> str:
        if self is LanguageVersion.PREVIEW:
            return "preview"
        major, minor = divmod(self.value, 100) if self.value > 100 else (self.value, 0)
        return f"{major}.{minor}"


#: Newest released version; what ``latest`` and ``default`` resolve to.
LATEST_MAJOR = LanguageVersion.CSHARP13

_ALIASES: dict[str, LanguageVersion] = {
    "default": LATEST_MAJOR,
    "latest": LATEST_MAJOR,
    "latestmajor": LATEST_MAJOR,
    "preview": LanguageVersion.PREVIEW,
}

_NUMERIC_PATTERN = re.compile(r"^(?:csharp)?(\d+)(?:[._](\d+))?$")


def parse_language_version(value: LanguageVersion | int | str) -> LanguageVersion:
    """Parse a language version from an enum member, encoded int, or string.

    Accepted strings (case-insensitive): ``"8"``, ``"8.0"``, ``"7.3"``,
    ``"csharp9"``, ``"CSharp7_3"``, and the aliases ``default``, ``latest``,
    ``latestmajor`` and ``preview``.

    Raises:
        ConfigurationError: If the value names no known language version.
    """
    if isinstance(value, LanguageVersion):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return LanguageVersion(value)
        except ValueError:
            raise ConfigurationError(
                f"Unknown language version value: {value}",
                hint="Use the compiler encoding, e.g. 703 for C# 7.3 or 800 for C# 8.",
            ) from None
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _ALIASES:
            return _ALIASES[text]
        match = _NUMERIC_PATTERN.match(text)
        if match is not None:
            major = int(match.group(1))
            minor = int(match.group(2) or 0)
            encoded = major if major <= 7 and minor == 0 else major * 100 + minor
            try:
                return LanguageVersion(encoded)
            except ValueError:
                pass
    raise ConfigurationError(
        f"Unknown language version: {value!r}",
        hint="Use a version like '8.0' or '7.3', or one of: "
        + ", ".join(sorted(_ALIASES)),
    )


__all__ = ["LATEST_MAJOR", "LanguageVersion", "parse_language_version"]
