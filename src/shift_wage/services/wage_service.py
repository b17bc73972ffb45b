# src/shift_wage/services/wage_service.py
import logging
import math
import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

logger = logging.getLogger(__name__)

TIME_PATTERN = re.compile(r"([01][0-9]|2[0-3]):[0-5][0-9]")
# Plain ASCII decimal, optionally signed, with an optional exponent
RATE_PATTERN = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")

TIME_FORMAT_MESSAGE = "Times must be in 24-hour HH:MM format, e.g. 09:00, 17:30."
RATE_MESSAGE = "Please enter a valid hourly rate greater than zero."


class WageServiceError(Exception): pass


class InvalidTimeFormatError(WageServiceError):
    def __init__(self, field: str, fields: Optional[Tuple[str, ...]] = None, message: str = TIME_FORMAT_MESSAGE):
        super().__init__(message)
        self.field = field
        self.fields = tuple(fields) if fields else (field,)


class InvalidRateError(WageServiceError):
    def __init__(self, message: str = RATE_MESSAGE):
        super().__init__(message)


@dataclass(frozen=True)
class TimeOfDay:
    """A wall-clock time within a single day, with no date component."""
    hour: int
    minute: int

    def __post_init__(self):
        if not (0 <= self.hour <= 23 and 0 <= self.minute <= 59):
            raise ValueError(f"Time of day out of range: {self.hour}:{self.minute}")

    def __str__(self):
        return f"{self.hour:02d}:{self.minute:02d}"


@dataclass(frozen=True)
class WageBreakdown:
    normal_hours: float
    night_hours: float
    total_pay: int

    @property
    def total_hours(self) -> float:
        return self.normal_hours + self.night_hours


class WageService:
    """
    Computes the pay for a single shift.

    Worked time is split into normal and night hours. Night hours fall in the
    window from 22:00 up to (not including) 05:00 and are paid at 1.25x the
    base rate. Classification is done in 15-minute buckets, each bucket
    taking the class of its starting instant.
    """
    NIGHT_START_HOUR = 22
    NIGHT_END_HOUR = 5
    BUCKET_HOURS = 0.25
    NIGHT_MULTIPLIER = 1.25

    def parse_time_of_day(self, value: str, field: str = "time") -> TimeOfDay:
        """Parse a strict 'HH:MM' 24-hour string. Nothing is clamped or padded."""
        if not isinstance(value, str) or not TIME_PATTERN.fullmatch(value):
            raise InvalidTimeFormatError(field)
        hours, minutes = value.split(":")
        return TimeOfDay(int(hours), int(minutes))

    def to_decimal_hours(self, time_of_day: TimeOfDay) -> float:
        return time_of_day.hour + time_of_day.minute / 60

    def compute_duration(self, start: float, end: float) -> float:
        """Elapsed hours from start to end, rolling over midnight when end < start.

        Equal start and end is a zero-length shift, not a 24 hour one.
        """
        if end >= start:
            return end - start
        return (24 - start) + end

    def is_night_hour(self, hour: float) -> bool:
        return hour >= self.NIGHT_START_HOUR or hour < self.NIGHT_END_HOUR

    def partition_night_hours(self, start_decimal: float, total_hours: float,
                              bucket_size: float = BUCKET_HOURS) -> float:
        """
        Sweep the shift in fixed buckets and return the hours that fall at night.

        A bucket counts as night when its start sample is inside the night
        window, even if the window boundary falls part way through it. Offsets
        are derived from the bucket index so repeated addition never drifts.
        A shift ending mid-bucket only contributes the part it actually covers.
        """
        if bucket_size <= 0:
            raise ValueError(f"bucket_size must be positive, got {bucket_size}")

        night_hours = 0.0
        index = 0
        offset = 0.0
        while offset < total_hours:
            current_hour = (start_decimal + offset) % 24
            if self.is_night_hour(current_hour):
                night_hours += min(bucket_size, total_hours - offset)
            index += 1
            offset = index * bucket_size
        return min(night_hours, total_hours)

    def parse_rate(self, rate_input: Union[str, int, float]) -> float:
        if isinstance(rate_input, bool):
            raise InvalidRateError()
        if isinstance(rate_input, str):
            rate_input = rate_input.strip()
            if not RATE_PATTERN.fullmatch(rate_input):
                raise InvalidRateError()
        try:
            rate = float(rate_input)
        except (TypeError, ValueError):
            raise InvalidRateError() from None
        if not math.isfinite(rate) or rate <= 0:
            raise InvalidRateError()
        return rate

    def compute_wage(self, rate_input: Union[str, int, float], start_input: str, end_input: str) -> WageBreakdown:
        """
        Validate the three raw inputs and compute the shift's pay breakdown.

        Times are checked before the rate, so a bad time is reported even when
        the rate is bad too. Raises InvalidTimeFormatError or InvalidRateError.
        """
        raw_times = {"start": start_input, "end": end_input}
        parsed = {}
        invalid_fields = []
        for field, raw in raw_times.items():
            value = raw.strip() if isinstance(raw, str) else raw
            try:
                parsed[field] = self.parse_time_of_day(value, field=field)
            except InvalidTimeFormatError:
                invalid_fields.append(field)
        if invalid_fields:
            logger.warning(f"Rejected time input for {', '.join(invalid_fields)}: {raw_times}")
            raise InvalidTimeFormatError(invalid_fields[0], tuple(invalid_fields))

        try:
            rate = self.parse_rate(rate_input)
        except InvalidRateError:
            logger.warning(f"Rejected hourly rate input: {rate_input!r}")
            raise

        start_decimal = self.to_decimal_hours(parsed["start"])
        end_decimal = self.to_decimal_hours(parsed["end"])
        total_hours = self.compute_duration(start_decimal, end_decimal)
        night_hours = self.partition_night_hours(start_decimal, total_hours)
        normal_hours = total_hours - night_hours

        normal_pay = normal_hours * rate
        night_pay = night_hours * rate * self.NIGHT_MULTIPLIER
        total = normal_pay + night_pay
        if not math.isfinite(total):
            logger.warning(f"Hourly rate {rate_input!r} overflows the pay total")
            raise InvalidRateError("The hourly rate is too large to calculate a wage.")
        total_pay = int(math.floor(total + 0.5))

        breakdown = WageBreakdown(normal_hours=normal_hours, night_hours=night_hours, total_pay=total_pay)
        logger.debug(
            f"Computed wage for {parsed['start']} -> {parsed['end']} at rate {rate}: "
            f"normal={normal_hours:.2f}h night={night_hours:.2f}h pay={total_pay}"
        )
        return breakdown


wage_service = WageService()
