"""
METAR decoding.

Provides:
- Metar: Decoded report and its field models (Wind, Visibility, ...)
- MetarParser: Assemble a Metar from raw report text
- Field recognizers: Decode individual report groups
- MetarParsingError: Base of the errors raised for rejected reports

Example:
    from metar_taf.metar import parse_metar

    metar = parse_metar("KLAX 021253Z 10003KT 10SM CLR 07/M01 A3009 RMK AO2")
    print(metar.temperature.dewpoint)  # -1
"""

from metar_taf.metar.models import (
    Metar,
    ReportType,
    ObservationTime,
    Wind,
    WindUnit,
    Visibility,
    RunwayVisualRange,
    WeatherType,
    CloudLayer,
    Temperature,
    Altimeter,
    PressureUnit,
    RunwayCondition,
)
from metar_taf.metar.exceptions import (
    ErrorKind,
    MetarParsingError,
    MissingFieldError,
    MalformedFieldError,
    UnrecognizedTokenError,
)
from metar_taf.metar.lexer import tokenize, TokenStream
from metar_taf.metar.parser import (
    MetarParser,
    DEFAULT_REQUIRED_FIELDS,
    parse_metar,
    try_parse_metar,
)

__all__ = [
    'Metar',
    'ReportType',
    'ObservationTime',
    'Wind',
    'WindUnit',
    'Visibility',
    'RunwayVisualRange',
    'WeatherType',
    'CloudLayer',
    'Temperature',
    'Altimeter',
    'PressureUnit',
    'RunwayCondition',
    'ErrorKind',
    'MetarParsingError',
    'MissingFieldError',
    'MalformedFieldError',
    'UnrecognizedTokenError',
    'tokenize',
    'TokenStream',
    'MetarParser',
    'DEFAULT_REQUIRED_FIELDS',
    'parse_metar',
    'try_parse_metar',
]
