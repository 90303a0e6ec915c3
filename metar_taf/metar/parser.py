"""
Assemble a Metar from the tokens of a raw report.

The report header is fixed: station identifier, observation time, then the
optional AUTO and COR flags. The body is classified token by token: each
token is offered to the recognizers in a fixed priority order and the first
one that matches takes it. Singular fields (wind, visibility, temperature,
altimeter, NOSIG) are filled once and skipped afterwards. RMK ends the body
and everything after it is kept as free text.
"""

import logging
from typing import Iterable, List, Optional, Type

from metar_taf.metar.exceptions import (
    MetarParsingError,
    MissingFieldError,
    UnrecognizedTokenError,
)
from metar_taf.metar.lexer import TokenStream
from metar_taf.metar.models import Metar, ReportType
from metar_taf.metar.recognizers import (
    AirportRecognizer,
    AltimeterRecognizer,
    CloudLayerRecognizer,
    FieldRecognizer,
    ObservationTimeRecognizer,
    RunwayConditionRecognizer,
    RunwayVisualRangeRecognizer,
    TemperatureRecognizer,
    VisibilityRecognizer,
    WeatherTypeRecognizer,
    WindRecognizer,
)

logger = logging.getLogger(__name__)

# Singular body fields that may be required, with their recognizer
SINGULAR_FIELDS = {
    'wind': WindRecognizer,
    'visibility': VisibilityRecognizer,
    'temperature': TemperatureRecognizer,
    'altimeter': AltimeterRecognizer,
}

DEFAULT_REQUIRED_FIELDS = ('wind', 'visibility', 'temperature', 'altimeter')


class MetarParser:
    """
    Parse METAR reports into Metar objects.

    Args:
        required_fields: Singular fields that must be present for the
            report to be accepted. Any of wind, visibility, temperature
            and altimeter.

    Example:
        metar = MetarParser().parse(
            "EGLL 021250Z 23009KT 9999 SCT023 BKN029 08/06 Q1024"
        )
        metar.wind.speed  # 9
    """

    AUTO = 'AUTO'
    CORRECTION = 'COR'
    NOSIG = 'NOSIG'
    REMARKS = 'RMK'

    def __init__(self, required_fields: Iterable[str] = DEFAULT_REQUIRED_FIELDS):
        required = tuple(required_fields)
        unknown = [name for name in required if name not in SINGULAR_FIELDS]
        if unknown:
            raise ValueError(f"Unknown required fields: {', '.join(unknown)}")
        self.required_fields = required

    def parse(self, raw: str) -> Metar:
        """
        Parse a single METAR report.

        Args:
            raw: Report text, optionally prefixed with METAR or SPECI

        Returns:
            Fully decoded Metar

        Raises:
            MissingFieldError: A mandatory field is absent
            UnrecognizedTokenError: A token before RMK matches no field
        """
        stream = TokenStream.from_text(raw)

        report_type = ReportType.METAR
        if stream.peek() in (ReportType.METAR.value, ReportType.SPECI.value):
            report_type = ReportType(stream.pop())

        airport = self._required(stream, AirportRecognizer)
        time = self._required(stream, ObservationTimeRecognizer)
        auto_observation = self._flag(stream, self.AUTO)
        correction = self._flag(stream, self.CORRECTION)

        fields = {name: None for name in SINGULAR_FIELDS}
        rvr = []
        weather_types = []
        cloud_layers = []
        runway_conditions = []
        nosig = False
        remarks = None

        while stream:
            token = stream.pop()

            if fields['wind'] is None:
                fields['wind'] = self._try_with_continuation(stream, token, WindRecognizer)
                if fields['wind'] is not None:
                    continue

            if fields['visibility'] is None:
                fields['visibility'] = self._try_with_continuation(stream, token, VisibilityRecognizer)
                if fields['visibility'] is not None:
                    continue

            entry = RunwayVisualRangeRecognizer.try_parse(token)
            if entry is not None:
                rvr.append(entry)
                continue

            entry = WeatherTypeRecognizer.try_parse(token)
            if entry is not None:
                weather_types.append(entry)
                continue

            entry = CloudLayerRecognizer.try_parse(token)
            if entry is not None:
                cloud_layers.append(entry)
                continue

            if fields['temperature'] is None:
                fields['temperature'] = TemperatureRecognizer.try_parse(token)
                if fields['temperature'] is not None:
                    continue

            if fields['altimeter'] is None:
                fields['altimeter'] = AltimeterRecognizer.try_parse(token)
                if fields['altimeter'] is not None:
                    continue

            if not nosig and token == self.NOSIG:
                nosig = True
                continue

            entry = RunwayConditionRecognizer.try_parse(token)
            if entry is not None:
                runway_conditions.append(entry)
                continue

            if token == self.REMARKS:
                remarks = ' '.join(stream.drain())
                break

            raise UnrecognizedTokenError(token, stream.remaining())

        for name in self.required_fields:
            if fields[name] is None:
                raise MissingFieldError(name, SINGULAR_FIELDS[name].expected)

        return Metar(
            raw=raw,
            airport=airport,
            time=time,
            report_type=report_type,
            auto_observation=auto_observation,
            correction=correction,
            wind=fields['wind'],
            visibility=fields['visibility'],
            rvr=tuple(rvr),
            weather_types=tuple(weather_types),
            cloud_layers=tuple(cloud_layers),
            temperature=fields['temperature'],
            altimeter=fields['altimeter'],
            nosig=nosig,
            runway_conditions=tuple(runway_conditions),
            remarks=remarks,
        )

    def try_parse(self, raw: str) -> Optional[Metar]:
        """
        Parse a report, returning None instead of raising on failure.

        Args:
            raw: Report text

        Returns:
            Metar or None if parsing fails
        """
        try:
            return self.parse(raw)
        except MetarParsingError as e:
            logger.debug("Failed to parse METAR: %s - %s", raw[:80], e)
            return None

    def parse_many(self, lines: Iterable[str]) -> List[Metar]:
        """
        Parse one report per line, skipping blank lines and failed reports.

        Args:
            lines: Report lines, e.g. an open file

        Returns:
            Successfully parsed reports, in input order
        """
        reports = []
        failed = 0
        for line in lines:
            line = line.strip()
            if not line:
                continue
            report = self.try_parse(line)
            if report is None:
                failed += 1
            else:
                reports.append(report)
        if failed:
            logger.info("Parsed %d METAR reports, %d failed", len(reports), failed)
        return reports

    @staticmethod
    def _required(stream: TokenStream, recognizer: Type[FieldRecognizer]):
        token = stream.pop()
        result = recognizer.try_parse(token)
        if result is None:
            remaining = stream.remaining()
            raise MissingFieldError(
                recognizer.field_name, recognizer.expected, token=token, remaining=remaining
            )
        return result

    @staticmethod
    def _flag(stream: TokenStream, literal: str) -> bool:
        if stream.peek() == literal:
            stream.pop()
            return True
        return False

    @staticmethod
    def _try_with_continuation(stream: TokenStream, token: str, recognizer):
        """
        Try token, merged with the next token when that one has the shape of
        a continuation group ("170V280" after the wind, "1/2SM" after "1").

        If the merged text doesn't match, the continuation goes back to the
        stream and the token is tried alone.
        """
        continuation = stream.peek()
        if continuation is not None and recognizer.CONTINUATION_PATTERN.match(continuation):
            stream.pop()
            result = recognizer.try_parse(f"{token} {continuation}")
            if result is not None:
                return result
            stream.push_back()
        return recognizer.try_parse(token)


_default_parser = MetarParser()


def parse_metar(raw: str) -> Metar:
    """Parse a METAR report with the default parser (raises on failure)."""
    return _default_parser.parse(raw)


def try_parse_metar(raw: str) -> Optional[Metar]:
    """Parse a METAR report with the default parser, None on failure."""
    return _default_parser.try_parse(raw)
