"""
CSV table encoding.

Writes a header line of column titles followed by one line per record,
each terminated by a bare newline. Values containing the delimiter, the
quote character or a line break are quoted per RFC 4180.
"""

import csv
from dataclasses import dataclass
from io import StringIO
from typing import Any, Mapping, Sequence


@dataclass(frozen=True)
class CsvColumn:
    """One output column: the record key to read and the header title."""
    field_id: str
    title: str


def encode_csv(
    columns: Sequence[CsvColumn],
    records: Sequence[Mapping[str, Any]],
) -> str:
    """
    Encode records as a CSV document.

    Args:
        columns: Ordered column definitions
        records: Row mappings keyed by column field_id

    Returns:
        CSV text; header only when records is empty

    Raises:
        ValueError: If a record is missing a column or has an extra key
    """
    fieldnames = [column.field_id for column in columns]

    output = StringIO()
    writer = csv.DictWriter(
        output,
        fieldnames=fieldnames,
        lineterminator="\n",
        quoting=csv.QUOTE_MINIMAL,
        extrasaction="raise",
    )

    writer.writerow({column.field_id: column.title for column in columns})

    for index, record in enumerate(records):
        missing = [name for name in fieldnames if name not in record]
        if missing:
            raise ValueError(f"Record {index} is missing columns: {missing}")
        writer.writerow(record)

    return output.getvalue()
