#!/usr/bin/env python3
"""
Split CSV style records with enclosplit.

Fields may be wrapped in double quotes; a doubled quote inside a quoted
field stands for one literal quote, as in RFC 4180.

Usage:
    python examples/csv_fields.py
"""

from enclosplit import SplittingError, new_splitter
from enclosplit.enclosures import DOUBLE_QUOTES_DOUBLE_ESCAPED
from enclosplit.policies import NO_MULTIS, UNESCAPE_QUOTES

RECORDS = [
    'id,name,comment',
    '1,"Smith, John","said ""hi"""',
    '2,Jane,',
    '3,"unterminated,oops',
    '4,"a" "b",bad',
]


def main():
    """Split each record and print its fields."""
    splitter = new_splitter(",", DOUBLE_QUOTES_DOUBLE_ESCAPED)
    splitter.add_default_policies(NO_MULTIS, UNESCAPE_QUOTES)

    for record in RECORDS:
        print("=" * 60)
        print(f"Record: {record}")
        try:
            fields = splitter.split(record)
        except SplittingError as e:
            print(f"  ✗ {e.kind.value}: {e}")
            continue
        for index, field in enumerate(fields):
            print(f"  [{index}] {field!r}")


if __name__ == "__main__":
    main()
