from collections.abc import Mapping

from models.country import CountryRecord, CountryResult

ALL_DIRECTIVE = "all"


def resolve(raw_query: str, table: Mapping[str, CountryRecord]) -> list[CountryResult]:
    """Resolve a comma-separated list of country names against the table.

    Matching is case-insensitive but each result echoes the token as the
    caller wrote it (whitespace trimmed). Unknown tokens are dropped, order
    and duplicates are kept. ``all`` returns the whole table sorted by key.
    """
    query = raw_query.strip()
    if query.lower() == ALL_DIRECTIVE:
        return [
            CountryResult.from_record(key, record)
            for key, record in sorted(table.items())
        ]

    results = []
    for token in query.split(","):
        name = token.strip()
        record = table.get(name.lower())
        if record is not None:
            results.append(CountryResult.from_record(name, record))
    return results
