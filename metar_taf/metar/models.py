"""METAR report data models."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional, Tuple, Dict, Any

from dateutil.relativedelta import relativedelta


class ReportType(Enum):
    """Type of observation report."""

    METAR = "METAR"
    SPECI = "SPECI"


class WindUnit(Enum):
    """Unit of wind speed."""

    KT = "KT"
    MPS = "MPS"


class PressureUnit(Enum):
    """
    Measurement system of an altimeter setting.

    The value is the letter that prefixes the setting in the report:
    Q1013 is hectopascals, A2992 is hundredths of inches of mercury.
    """

    HECTOPASCALS = "Q"
    INCHES_OF_MERCURY = "A"


@dataclass(frozen=True)
class ObservationTime:
    """
    Day of month and UTC time of the observation (DDHHMMZ).

    Attributes:
        raw: Token as it appeared in the report, e.g. "021300Z"
        day: Day of month
        hour: Hour (UTC)
        minute: Minute
    """

    raw: str
    day: int
    hour: int
    minute: int

    def to_datetime(self, reference: Optional[datetime] = None) -> datetime:
        """
        Resolve to a full datetime using the month of a reference time.

        A report only carries the day of month, so the month and year come
        from the reference (now, in UTC, by default). When the day lies
        after the reference day the observation belongs to the previous
        month. Hour 24 rolls over to 00 on the following day.

        Raises:
            ValueError: If the day is 0 or doesn't exist in the resolved
                month
        """
        reference = reference or datetime.now(timezone.utc)
        month_start = reference.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
        if self.day > reference.day:
            month_start -= relativedelta(months=1)
        observed = month_start.replace(day=self.day)
        return observed + timedelta(hours=self.hour, minutes=self.minute)

    def to_dict(self) -> dict:
        return {
            'raw': self.raw,
            'day': self.day,
            'hour': self.hour,
            'minute': self.minute,
        }


@dataclass(frozen=True)
class Wind:
    """
    Surface wind.

    A report that carries only slashes ("/////") gives a Wind whose decoded
    fields are all None.

    Attributes:
        raw: Matched text, including the variation group when present
        direction: Three digit bearing as text ("010") or "VRB"
        speed: Mean speed
        gust: Gust speed
        unit: Speed unit
        min_variation: Start of the direction variation sector
        max_variation: End of the direction variation sector
    """

    raw: str
    direction: Optional[str] = None
    speed: Optional[int] = None
    gust: Optional[int] = None
    unit: Optional[WindUnit] = None
    min_variation: Optional[int] = None
    max_variation: Optional[int] = None

    VARIABLE = "VRB"

    @property
    def is_reported(self) -> bool:
        return self.speed is not None

    @property
    def is_variable(self) -> bool:
        return self.direction == self.VARIABLE

    @property
    def degrees(self) -> Optional[int]:
        """Direction in degrees, None when variable or not reported."""
        if self.direction is None or self.is_variable:
            return None
        return int(self.direction)

    def to_dict(self) -> dict:
        return {
            'raw': self.raw,
            'direction': self.direction,
            'speed': self.speed,
            'gust': self.gust,
            'unit': self.unit.value if self.unit else None,
            'min_variation': self.min_variation,
            'max_variation': self.max_variation,
        }


@dataclass(frozen=True)
class Visibility:
    """
    Prevailing visibility.

    Attributes:
        raw: Matched text; "1 1/2SM" when a whole number and a fraction
            were given as two tokens
        value: "CAVOK", an integer ("9999"), a fraction ("1/2") or a mixed
            number ("1 1/2")
        unit: "SM" for statute miles, None otherwise
        no_directional_variation: True when suffixed with NDV
        qualifier: "M" (less than) or "P" (more than)
    """

    raw: str
    value: str
    unit: Optional[str] = None
    no_directional_variation: bool = False
    qualifier: Optional[str] = None

    CAVOK = "CAVOK"

    @property
    def is_cavok(self) -> bool:
        return self.value == self.CAVOK

    def to_dict(self) -> dict:
        return {
            'raw': self.raw,
            'value': self.value,
            'unit': self.unit,
            'no_directional_variation': self.no_directional_variation,
            'qualifier': self.qualifier,
        }


@dataclass(frozen=True)
class RunwayVisualRange:
    """
    Runway visual range for one runway (R16R/1800V3000FT).

    Attributes:
        raw: Matched text
        runway: Runway designator including its leading R, e.g. "R16R"
        assessment: "M" (below) or "P" (above) the measurable range
        value: Visual range
        variable_max: Upper bound when the range varies
        variable_max_assessment: "M" or "P" on the upper bound
        unit: "FT" when given in feet, None for meters
    """

    raw: str
    runway: str
    value: int
    assessment: Optional[str] = None
    variable_max: Optional[int] = None
    variable_max_assessment: Optional[str] = None
    unit: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            'raw': self.raw,
            'runway': self.runway,
            'value': self.value,
            'assessment': self.assessment,
            'variable_max': self.variable_max,
            'variable_max_assessment': self.variable_max_assessment,
            'unit': self.unit,
        }


@dataclass(frozen=True)
class WeatherType:
    """Present weather group, e.g. "-SHRA" or "FZFG"."""

    raw: str
    intensity_or_proximity: Optional[str] = None
    descriptor: Optional[str] = None
    precipitation: Optional[str] = None
    obscuration: Optional[str] = None
    other: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            'raw': self.raw,
            'intensity_or_proximity': self.intensity_or_proximity,
            'descriptor': self.descriptor,
            'precipitation': self.precipitation,
            'obscuration': self.obscuration,
            'other': self.other,
        }


@dataclass(frozen=True)
class CloudLayer:
    """
    A single cloud layer.

    Attributes:
        raw: Matched text
        coverage: CLR/SKC, or FEW, SCT, BKN, OVC, VV, NSC, NCD
        altitude: Base in hundreds of feet
        cloud_type: CB, TCU or ACC
    """

    raw: str
    coverage: str
    altitude: Optional[int] = None
    cloud_type: Optional[str] = None

    @property
    def altitude_ft(self) -> Optional[int]:
        if self.altitude is None:
            return None
        return self.altitude * 100

    def to_dict(self) -> dict:
        return {
            'raw': self.raw,
            'coverage': self.coverage,
            'altitude': self.altitude,
            'cloud_type': self.cloud_type,
        }


@dataclass(frozen=True)
class Temperature:
    """Temperature and dewpoint in whole degrees Celsius."""

    raw: str
    temperature: int
    dewpoint: int

    def to_dict(self) -> dict:
        return {
            'raw': self.raw,
            'temperature': self.temperature,
            'dewpoint': self.dewpoint,
        }


@dataclass(frozen=True)
class Altimeter:
    """Altimeter setting, kept as the 4-digit code of its unit."""

    raw: str
    value: str
    unit: PressureUnit

    def to_dict(self) -> dict:
        return {
            'raw': self.raw,
            'value': self.value,
            'unit': self.unit.value,
        }


@dataclass(frozen=True)
class RunwayCondition:
    """
    Runway surface condition (R14L/290161).

    The raw code characters are always kept. The matching description is
    None when the code table has no entry for them.
    """

    raw: str
    runway: str
    deposit: str
    extent: str
    depth: str
    friction: str
    deposit_description: Optional[str] = None
    extent_description: Optional[str] = None
    depth_description: Optional[str] = None
    friction_description: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            'raw': self.raw,
            'runway': self.runway,
            'deposit': self.deposit,
            'extent': self.extent,
            'depth': self.depth,
            'friction': self.friction,
            'deposit_description': self.deposit_description,
            'extent_description': self.extent_description,
            'depth_description': self.depth_description,
            'friction_description': self.friction_description,
        }


@dataclass(frozen=True)
class Metar:
    """
    A decoded METAR report.

    Repeated groups (RVR, weather, clouds, runway conditions) are tuples in
    the order they appeared in the report.

    Attributes:
        raw: Original report text
        airport: Station identifier (ICAO code)
        time: Observation time
        report_type: METAR or SPECI
        auto_observation: Report generated without human intervention
        correction: Corrected report (COR)
        wind: Surface wind
        visibility: Prevailing visibility
        rvr: Runway visual ranges
        weather_types: Present weather groups
        cloud_layers: Cloud layers
        temperature: Temperature and dewpoint
        altimeter: Altimeter setting
        nosig: No significant change expected
        runway_conditions: Runway surface conditions
        remarks: Text following RMK
    """

    raw: str
    airport: str
    time: ObservationTime
    report_type: ReportType = ReportType.METAR
    auto_observation: bool = False
    correction: bool = False
    wind: Optional[Wind] = None
    visibility: Optional[Visibility] = None
    rvr: Tuple[RunwayVisualRange, ...] = ()
    weather_types: Tuple[WeatherType, ...] = ()
    cloud_layers: Tuple[CloudLayer, ...] = ()
    temperature: Optional[Temperature] = None
    altimeter: Optional[Altimeter] = None
    nosig: bool = False
    runway_conditions: Tuple[RunwayCondition, ...] = ()
    remarks: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary for JSON export."""
        return {
            'raw': self.raw,
            'airport': self.airport,
            'time': self.time.to_dict(),
            'report_type': self.report_type.value,
            'auto_observation': self.auto_observation,
            'correction': self.correction,
            'wind': self.wind.to_dict() if self.wind else None,
            'visibility': self.visibility.to_dict() if self.visibility else None,
            'rvr': [r.to_dict() for r in self.rvr],
            'weather_types': [w.to_dict() for w in self.weather_types],
            'cloud_layers': [c.to_dict() for c in self.cloud_layers],
            'temperature': self.temperature.to_dict() if self.temperature else None,
            'altimeter': self.altimeter.to_dict() if self.altimeter else None,
            'nosig': self.nosig,
            'runway_conditions': [r.to_dict() for r in self.runway_conditions],
            'remarks': self.remarks,
        }

    def __repr__(self) -> str:
        return f"Metar({self.report_type.value} {self.airport} {self.time.raw})"
