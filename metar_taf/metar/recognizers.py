"""
Recognizers for the individual groups of a METAR report.

Each recognizer tests a single token (or two tokens joined by a space, for
the wind variation and mixed-fraction visibility groups) against the
grammar of one field:

- try_parse() returns the decoded entity, or None when the token is not
  that field. It never raises.
- parse() is the required form: it raises MalformedFieldError instead of
  returning None.

Example:
    WindRecognizer.try_parse("23007KT 170V280")
    # Wind(raw='23007KT 170V280', direction='230', speed=7, ...)
    WindRecognizer.try_parse("9999")
    # None
"""

import re
from abc import ABC, abstractmethod
from typing import Any, Optional, Pattern

from metar_taf.metar import code_tables
from metar_taf.metar.exceptions import MalformedFieldError
from metar_taf.metar.models import (
    Altimeter,
    CloudLayer,
    ObservationTime,
    PressureUnit,
    RunwayCondition,
    RunwayVisualRange,
    Temperature,
    Visibility,
    WeatherType,
    Wind,
    WindUnit,
)


class FieldRecognizer(ABC):
    """Base interface for field recognizers."""

    field_name: str = ""
    expected: str = ""

    @classmethod
    @abstractmethod
    def try_parse(cls, token: Optional[str]) -> Optional[Any]:
        """Decode token, or return None if it doesn't match this field."""

    @classmethod
    def parse(cls, token: Optional[str]) -> Any:
        """
        Decode token, which must match this field.

        Raises:
            MalformedFieldError: If the token doesn't match
        """
        result = cls.try_parse(token)
        if result is None:
            raise MalformedFieldError(cls.field_name, cls.expected, token)
        return result

    @staticmethod
    def _match(pattern: Pattern, token: Optional[str]):
        if not token:
            return None
        return pattern.match(token)


class AirportRecognizer(FieldRecognizer):
    """Station identifier: 3-4 characters, starting with a letter."""

    field_name = "airport"
    expected = "station identifier (e.g. EGLL)"

    PATTERN = re.compile(r'^[A-Z][A-Z0-9]{2,3}$')

    @classmethod
    def try_parse(cls, token: Optional[str]) -> Optional[str]:
        if cls._match(cls.PATTERN, token):
            return token
        return None


class ObservationTimeRecognizer(FieldRecognizer):
    """Observation time as DDHHMMZ. Day 00 is rejected, hour 24 is accepted."""

    field_name = "time"
    expected = "observation time DDHHMMZ"

    PATTERN = re.compile(
        r'^(?P<day>0[1-9]|[12]\d|3[01])'
        r'(?P<hour>[01]\d|2[0-4])'
        r'(?P<minute>[0-5]\d)Z$'
    )

    @classmethod
    def try_parse(cls, token: Optional[str]) -> Optional[ObservationTime]:
        match = cls._match(cls.PATTERN, token)
        if not match:
            return None
        return ObservationTime(
            raw=token,
            day=int(match.group('day')),
            hour=int(match.group('hour')),
            minute=int(match.group('minute')),
        )


class WindRecognizer(FieldRecognizer):
    """
    Surface wind: dddffGggKT, optionally followed by a variation group.

    "23007KT 170V280" decodes direction 230 at 7 knots, varying between
    170 and 280 degrees.
    """

    field_name = "wind"
    expected = "wind dddff[Ggg]KT|MPS"

    PATTERN = re.compile(
        r'^(?P<direction>VRB|\d{3})'
        r'(?P<speed>\d{2,3})'
        r'(?:G(?P<gust>\d{2,3}))?'
        r'(?P<unit>KT|MPS)'
        r'(?: (?P<min>\d{1,3})V(?P<max>\d{1,3}))?$'
    )
    NOT_REPORTED_PATTERN = re.compile(r'^/+$')

    # Second token that may be merged into the wind group
    CONTINUATION_PATTERN = re.compile(r'^\d{1,3}V\d{1,3}$')

    @classmethod
    def try_parse(cls, token: Optional[str]) -> Optional[Wind]:
        if cls._match(cls.NOT_REPORTED_PATTERN, token):
            return Wind(raw=token)

        match = cls._match(cls.PATTERN, token)
        if not match:
            return None

        direction = match.group('direction')
        if direction != Wind.VARIABLE and int(direction) > 360:
            return None

        gust = match.group('gust')
        min_variation = match.group('min')
        max_variation = match.group('max')
        return Wind(
            raw=token,
            direction=direction,
            speed=int(match.group('speed')),
            gust=int(gust) if gust else None,
            unit=WindUnit(match.group('unit')),
            min_variation=int(min_variation) if min_variation else None,
            max_variation=int(max_variation) if max_variation else None,
        )


class VisibilityRecognizer(FieldRecognizer):
    """
    Prevailing visibility: CAVOK, meters (9999) or statute miles (1 1/2SM).

    An M or P prefix marks a value below or above the reportable range,
    NDV marks a sensor without directional variation.
    """

    field_name = "visibility"
    expected = "visibility CAVOK|nnnn|n/nSM"

    PATTERN = re.compile(
        r'^(?:(?P<cavok>CAVOK)'
        r'|(?P<qualifier>[MP])?(?P<value>\d+ \d+/\d+|\d+/\d+|\d+))'
        r'(?P<unit>SM)?'
        r'(?P<ndv>NDV)?$'
    )

    # Fractional part of a mixed number given as a separate token
    CONTINUATION_PATTERN = re.compile(r'^\d/\dSM$')

    @classmethod
    def try_parse(cls, token: Optional[str]) -> Optional[Visibility]:
        match = cls._match(cls.PATTERN, token)
        if not match:
            return None
        return Visibility(
            raw=token,
            value=match.group('cavok') or match.group('value'),
            unit=match.group('unit'),
            no_directional_variation=match.group('ndv') is not None,
            qualifier=match.group('qualifier'),
        )


class RunwayVisualRangeRecognizer(FieldRecognizer):
    """Runway visual range: R16R/1800V3000FT, R06/P6000FT, R24/1100D."""

    field_name = "rvr"
    expected = "runway visual range Rnn/nnnn[Vnnnn][FT]"

    PATTERN = re.compile(
        r'^(?P<runway>R\d{2}[LRC]?)/'
        r'(?P<assessment>[MP])?(?P<value>\d{4})'
        r'(?:V(?P<max_assessment>[MP])?(?P<max>\d{4})|[UDN])?'
        r'(?P<unit>FT)?$'
    )

    @classmethod
    def try_parse(cls, token: Optional[str]) -> Optional[RunwayVisualRange]:
        match = cls._match(cls.PATTERN, token)
        if not match:
            return None
        variable_max = match.group('max')
        return RunwayVisualRange(
            raw=token,
            runway=match.group('runway'),
            value=int(match.group('value')),
            assessment=match.group('assessment'),
            variable_max=int(variable_max) if variable_max else None,
            variable_max_assessment=match.group('max_assessment'),
            unit=match.group('unit'),
        )


class WeatherTypeRecognizer(FieldRecognizer):
    """
    Present weather: intensity, descriptor, precipitation, obscuration and
    other phenomena, each optional but always in that order.
    """

    field_name = "weather"
    expected = "present weather group"

    INTENSITY_OR_PROXIMITY = ('-', '+', 'VC')
    DESCRIPTORS = ('MI', 'BC', 'PR', 'DR', 'BL', 'SH', 'TS', 'FZ')
    PRECIPITATION = ('DZ', 'RA', 'SN', 'SG', 'IC', 'PE', 'PL', 'GR', 'GS', 'UP')
    OBSCURATION = ('BR', 'FG', 'FU', 'VA', 'DU', 'SA', 'HZ', 'PY')
    OTHER = ('PO', 'SQ', 'FC', 'SS', 'DS')

    PATTERN = re.compile(
        '^'
        '(?P<intensity>' + '|'.join(re.escape(c) for c in INTENSITY_OR_PROXIMITY) + ')?'
        '(?P<descriptor>' + '|'.join(DESCRIPTORS) + ')?'
        '(?P<precipitation>' + '|'.join(PRECIPITATION) + ')?'
        '(?P<obscuration>' + '|'.join(OBSCURATION) + ')?'
        '(?P<other>' + '|'.join(OTHER) + ')?'
        '$'
    )

    @classmethod
    def try_parse(cls, token: Optional[str]) -> Optional[WeatherType]:
        match = cls._match(cls.PATTERN, token)
        if not match:
            return None
        return WeatherType(
            raw=token,
            intensity_or_proximity=match.group('intensity'),
            descriptor=match.group('descriptor'),
            precipitation=match.group('precipitation'),
            obscuration=match.group('obscuration'),
            other=match.group('other'),
        )


class CloudLayerRecognizer(FieldRecognizer):
    """Cloud layer: CLR, or coverage with optional height and type (BKN029CB)."""

    field_name = "cloud_layer"
    expected = "cloud layer CLR|cccnnn[CB|TCU]"

    CLEAR = ('CLR', 'SKC')
    COVERAGE = ('FEW', 'SCT', 'BKN', 'OVC', 'VV', 'NSC', 'NCD')
    CLOUD_TYPES = ('CB', 'TCU', 'ACC')

    PATTERN = re.compile(
        r'^(?P<coverage>' + '|'.join(COVERAGE) + ')'
        r'(?P<altitude>\d{2,3}|///)?'
        r'(?P<type>' + '|'.join(CLOUD_TYPES) + '|///)?$'
    )

    @classmethod
    def try_parse(cls, token: Optional[str]) -> Optional[CloudLayer]:
        if token in cls.CLEAR:
            return CloudLayer(raw=token, coverage=token)

        match = cls._match(cls.PATTERN, token)
        if not match:
            return None
        altitude = match.group('altitude')
        cloud_type = match.group('type')
        return CloudLayer(
            raw=token,
            coverage=match.group('coverage'),
            altitude=int(altitude) if altitude and altitude.isdigit() else None,
            cloud_type=cloud_type if cloud_type != '///' else None,
        )


class TemperatureRecognizer(FieldRecognizer):
    """Temperature and dewpoint: 07/M01. M marks a value below zero."""

    field_name = "temperature"
    expected = "temperature [M]tt/[M]dd"

    PATTERN = re.compile(
        r'^(?P<temp_sign>M)?(?P<temp>\d+)/(?P<dew_sign>M)?(?P<dew>\d+)$'
    )

    @classmethod
    def try_parse(cls, token: Optional[str]) -> Optional[Temperature]:
        match = cls._match(cls.PATTERN, token)
        if not match:
            return None
        return Temperature(
            raw=token,
            temperature=cls._signed(match.group('temp_sign'), match.group('temp')),
            dewpoint=cls._signed(match.group('dew_sign'), match.group('dew')),
        )

    @staticmethod
    def _signed(sign: Optional[str], digits: str) -> int:
        value = int(digits)
        return -value if sign == 'M' else value


class AltimeterRecognizer(FieldRecognizer):
    """Altimeter setting: Q1013 (hPa) or A2992 (inHg x 100)."""

    field_name = "altimeter"
    expected = "altimeter Qnnnn|Annnn"

    PATTERN = re.compile(r'^(?P<unit>[QA])(?P<value>\d{4})$')

    @classmethod
    def try_parse(cls, token: Optional[str]) -> Optional[Altimeter]:
        match = cls._match(cls.PATTERN, token)
        if not match:
            return None
        return Altimeter(
            raw=token,
            value=match.group('value'),
            unit=PressureUnit(match.group('unit')),
        )


class RunwayConditionRecognizer(FieldRecognizer):
    """
    Runway surface condition: R14L/290161.

    The six characters after the slash are deposit type, extent of
    contamination, depth of deposit (2) and friction (2).
    """

    field_name = "runway_condition"
    expected = "runway condition Rnn/EeddBB"

    PATTERN = re.compile(
        r'^R(?P<runway>\d{2}[LRC]?)/'
        r'(?P<deposit>[\d/])'
        r'(?P<extent>[\d/])'
        r'(?P<depth>\d{2}|//)'
        r'(?P<friction>\d{2}|//)$'
    )

    @classmethod
    def try_parse(cls, token: Optional[str]) -> Optional[RunwayCondition]:
        match = cls._match(cls.PATTERN, token)
        if not match:
            return None
        deposit = match.group('deposit')
        extent = match.group('extent')
        depth = match.group('depth')
        friction = match.group('friction')
        return RunwayCondition(
            raw=token,
            runway=match.group('runway'),
            deposit=deposit,
            extent=extent,
            depth=depth,
            friction=friction,
            deposit_description=code_tables.lookup(code_tables.DEPOSIT_TYPES, deposit),
            extent_description=code_tables.lookup(code_tables.CONTAMINATION_EXTENT, extent),
            depth_description=code_tables.lookup(code_tables.DEPOSIT_DEPTH, depth),
            friction_description=code_tables.lookup(code_tables.FRICTION, friction),
        )
