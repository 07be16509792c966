"""Country dataset loader.

The dataset is a header line followed by ``key,flag,currencyCode,phoneCode``
rows. Keys may be official names, aliases or abbreviations; every key is
stored lowercased so query tokens can be matched after lowercasing.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from exceptions import DataSourceError, MalformedRecordError
from models.country import CountryRecord

logger = logging.getLogger(__name__)

_FIELD_NAMES = ("country", "flag", "currency code", "phone code")


class CountryTable(Mapping[str, CountryRecord]):
    """Read-only lookup table, built once and shared by every request."""

    def __init__(self, records: Mapping[str, CountryRecord]):
        self._records = MappingProxyType(dict(records))

    def __getitem__(self, key: str) -> CountryRecord:
        return self._records[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"CountryTable({len(self)} keys)"


def parse_record(line: str, line_no: int | None = None) -> tuple[str, CountryRecord]:
    # maxsplit keeps any extra commas inside the phone code field
    fields = [f.strip() for f in line.split(",", 3)]
    if len(fields) < 4:
        raise MalformedRecordError(
            f"expected 4 fields, got {len(fields)}", line=line_no
        )

    missing = [name for name, value in zip(_FIELD_NAMES, fields) if not value]
    if missing:
        raise MalformedRecordError(
            f"missing {', '.join(missing)}", line=line_no
        )

    key, flag, currency_code, phone_code = fields
    return key.lower(), CountryRecord(
        flag=flag, currency_code=currency_code, phone_code=phone_code
    )


def parse_country_data(
    lines: bytes | str | Iterable[bytes | str], source: str = "<memory>"
) -> CountryTable:
    """Build a table from raw dataset lines, or a whole document.

    Line 1 is the header and is always skipped. Blank lines are ignored,
    malformed records are logged and dropped, and a line that is not valid
    UTF-8 raises DataSourceError.
    """
    if isinstance(lines, (bytes, str)):
        lines = lines.splitlines()

    records: dict[str, CountryRecord] = {}
    skipped = 0

    for line_no, raw in enumerate(lines, start=1):
        if isinstance(raw, bytes):
            try:
                text = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise DataSourceError(
                    f"Cannot decode {source} line {line_no}: {e}",
                    source=source,
                    line=line_no,
                ) from e
        else:
            text = raw

        if line_no == 1 or not text.strip():
            continue

        try:
            key, record = parse_record(text, line_no)
        except MalformedRecordError as e:
            logger.warning("Skipping %s line %d: %s", source, line_no, e.message)
            skipped += 1
            continue

        if key in records:
            logger.debug("Duplicate key %r at %s line %d overrides earlier row", key, source, line_no)
        records[key] = record

    table = CountryTable(records)
    logger.info("Loaded %d countries from %s (%d skipped)", len(table), source, skipped)
    return table


def load(source: str | Path) -> CountryTable:
    path = Path(source)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise DataSourceError(
            f"Cannot read country data from {path}: {e}", source=str(path)
        ) from e
    # splitlines also breaks on a bare \r
    return parse_country_data(data, source=str(path))
