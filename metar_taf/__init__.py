"""
METAR surface weather report decoding library.

This package turns raw METAR text into typed report objects.

The main public API includes:
- parse_metar: Decode a report, raising MetarParsingError on failure
- try_parse_metar: Decode a report, returning None on failure
- MetarParser: Configurable parser (e.g. which fields are required)
- Metar: Decoded report
"""

from metar_taf.metar import (
    Metar,
    MetarParser,
    MetarParsingError,
    parse_metar,
    try_parse_metar,
)


__version__ = '0.1.0'
__all__ = [
    'Metar',
    'MetarParser',
    'MetarParsingError',
    'parse_metar',
    'try_parse_metar',
]
