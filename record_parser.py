import csv
import logging
import math
import os
import re

import numpy as np

from chart_model import LINE, BARS, series_class


logger = logging.getLogger(__name__)

_UNSIGNED_INT = re.compile(r"\+?[0-9]+")
MAX_COUNT = int(np.iinfo(np.int64).max)


class LoadError(Exception):
    """Any failure turning a path into a chart series."""


class RecordIOError(LoadError):
    pass


class RecordFormatError(LoadError):
    pass


class EmptyResultError(LoadError):
    pass


def _to_float(text):
    # no digit separators
    if "_" in text:
        raise RecordFormatError(f"Cannot coerce '{text}' to a number")
    try:
        value = float(text)
    except ValueError:
        raise RecordFormatError(f"Cannot coerce '{text}' to a number") from None
    if not math.isfinite(value):
        raise RecordFormatError(f"'{text}' is not a finite number")
    return value


def _to_count(text):
    if not _UNSIGNED_INT.fullmatch(text):
        raise RecordFormatError(f"Cannot coerce '{text}' to a non-negative integer")
    value = int(text)
    if value > MAX_COUNT:
        raise RecordFormatError(f"'{text}' is larger than {MAX_COUNT}")
    return value


def parse_row(row, variant):
    """Convert one CSV row to a (key, value) record, or raise RecordFormatError."""
    if len(row) < 2:
        raise RecordFormatError(f"Expected at least 2 columns, got {len(row)}")

    first = row[0].strip()
    second = row[1].strip()

    if variant == LINE:
        return _to_float(first), _to_float(second)
    if variant == BARS:
        return first, _to_count(second)
    raise ValueError(f"Unknown chart variant '{variant}'")


def _check_path(path):
    if not path:
        raise RecordIOError("No path given")
    if os.path.isdir(path):
        raise RecordIOError(f"{path} is a directory")


def _scan(reader):
    """Yield (line_no, row, error); a row the reader cannot split carries its csv.Error."""
    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except csv.Error as e:
            yield reader.line_num, None, RecordFormatError(str(e))
            continue
        yield reader.line_num, row, None


def parse(path, variant=LINE):
    cls = series_class(variant)
    _check_path(path)

    records = []
    skipped = 0
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            for line_no, row, error in _scan(csv.reader(f, skipinitialspace=True)):
                if error is None:
                    if not row:
                        continue
                    try:
                        records.append(parse_row(row, variant))
                        continue
                    except RecordFormatError as e:
                        error = e
                skipped += 1
                logger.debug("%s:%d skipped: %s", path, line_no, error)
    except (OSError, UnicodeDecodeError) as e:
        raise RecordIOError(str(e)) from e

    if not records:
        logger.info("%s: no usable rows (%d skipped)", path, skipped)
        raise EmptyResultError("No valid data found in CSV")

    logger.info("%s: loaded %d rows, skipped %d", path, len(records), skipped)
    return cls.from_records(records)
