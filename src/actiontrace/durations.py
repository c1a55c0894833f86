"""Convert between timedeltas and Go-style duration strings such as ``500ms`` or ``1m30s``."""
import datetime
import decimal
import re

UNITS = {
    "h": datetime.timedelta(hours=1),
    "m": datetime.timedelta(minutes=1),
    "s": datetime.timedelta(seconds=1),
    "ms": datetime.timedelta(milliseconds=1),
    "us": datetime.timedelta(microseconds=1),
}

# longest unit names first, so that "ms" is not read as "m" followed by garbage
PART_MATCHER = re.compile(r"(\d+(?:\.\d*)?)(ms|us|h|m|s)")


def _number(value: float) -> str:
    return str(int(value)) if value == int(value) else str(value)


def parse_duration(val: str) -> datetime.timedelta:
    sign = 1
    if val[:1] in ("-", "+"):
        sign = -1 if val[0] == "-" else 1
        val = val[1:]
    if not val:
        raise ValueError("Empty duration string")
    if val == "0":
        return datetime.timedelta()

    accum = datetime.timedelta()
    pos = 0
    while pos < len(val):
        match = PART_MATCHER.match(val, pos)
        if match is None:
            raise ValueError(f"Invalid duration string {val!r} at position {pos}")
        number, unit = decimal.Decimal(match[1]), UNITS[match[2]]
        num, denom = number.as_integer_ratio()
        accum += num * unit / denom
        pos = match.end()
    return sign * accum


def format_duration(val: datetime.timedelta) -> str:
    if val == datetime.timedelta():
        return "0"
    prefix = ""
    if val < datetime.timedelta():
        prefix = "-"
        val = -val

    if val < UNITS["ms"]:
        return f"{prefix}{val.microseconds}us"
    if val < UNITS["s"]:
        return f"{prefix}{_number(val / UNITS['ms'])}ms"

    parts = [prefix]
    hours, val = divmod(val, UNITS["h"])
    minutes, val = divmod(val, UNITS["m"])
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    if val:
        parts.append(f"{_number(val.total_seconds())}s")
    return "".join(parts)


def to_milliseconds(val: datetime.timedelta) -> int:
    return val // UNITS["ms"]
