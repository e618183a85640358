"""Decode uploaded CSV and spreadsheet files into a grid of raw cells."""

import csv
import logging
from pathlib import Path
from typing import Any, Iterable
from zipfile import BadZipFile

import openpyxl
import xlrd
from openpyxl.utils.exceptions import InvalidFileException

from pennypincher.domain.errors import UnreadableFileError, unsupported_file_type
from pennypincher.utils.text import is_blank

logger = logging.getLogger(__name__)

Cell = Any
Rows = list[list[Cell]]

CSV_SUFFIXES = {".csv", ".txt"}
SPREADSHEET_SUFFIXES = {".xlsx", ".xlsm"}
LEGACY_SPREADSHEET_SUFFIXES = {".xls"}
SUPPORTED_SUFFIXES = CSV_SUFFIXES | SPREADSHEET_SUFFIXES | LEGACY_SPREADSHEET_SUFFIXES


def _drop_empty(rows: Iterable[Iterable[Cell]]) -> Rows:
    grid = []
    for row in rows:
        cells = list(row)
        if all(is_blank(cell) for cell in cells):
            continue
        grid.append(cells)
    return grid


def parse_csv(path: Path) -> Rows:
    """Read a delimited text file. Every cell is returned as a string."""
    try:
        with open(path, "r", encoding="utf-8-sig", newline="") as f:
            # Try to detect delimiter, defaulting to comma
            sample = f.read(4096)
            f.seek(0)
            try:
                dialect = csv.Sniffer().sniff(sample, delimiters=",;\t")
            except csv.Error:
                dialect = csv.excel
            return _drop_empty(csv.reader(f, dialect))
    except (UnicodeDecodeError, csv.Error) as e:
        raise UnreadableFileError(f"Could not read CSV file '{path.name}': {e}") from e


def parse_spreadsheet(path: Path) -> Rows:
    """Read the first worksheet of an .xlsx workbook.

    Date cells come back as native datetimes, numbers as int/float.
    """
    try:
        workbook = openpyxl.load_workbook(path, read_only=True, data_only=True)
    except (InvalidFileException, BadZipFile, KeyError, OSError) as e:
        raise UnreadableFileError(f"Could not read spreadsheet '{path.name}': {e}") from e

    try:
        sheet = workbook.worksheets[0]
        return _drop_empty(sheet.iter_rows(values_only=True))
    finally:
        workbook.close()


def parse_legacy_spreadsheet(path: Path) -> Rows:
    """Read the first sheet of a legacy binary .xls workbook."""
    try:
        book = xlrd.open_workbook(str(path))
    except (xlrd.XLRDError, OSError) as e:
        raise UnreadableFileError(f"Could not read spreadsheet '{path.name}': {e}") from e

    sheet = book.sheet_by_index(0)
    rows = []
    for row_idx in range(sheet.nrows):
        row = []
        for cell in sheet.row(row_idx):
            if cell.ctype == xlrd.XL_CELL_DATE:
                row.append(xlrd.xldate_as_datetime(cell.value, book.datemode))
            elif cell.ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK):
                row.append(None)
            else:
                row.append(cell.value)
        rows.append(row)
    return _drop_empty(rows)


def parse_tabular(file_path: str | Path) -> Rows:
    """Decode a CSV or spreadsheet file into rows of raw cells.

    The first row is the header. Blank lines are dropped. No validation
    beyond decoding happens here: a file with only a header is valid output.

    Raises:
        FileNotFoundError: If the file does not exist
        UnreadableFileError: If the file type is unsupported or decoding fails
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Import file not found: {file_path}")

    suffix = path.suffix.lower()
    logger.info("Reading %s file %s", suffix or "untyped", path)

    if suffix in CSV_SUFFIXES:
        rows = parse_csv(path)
    elif suffix in SPREADSHEET_SUFFIXES:
        rows = parse_spreadsheet(path)
    elif suffix in LEGACY_SPREADSHEET_SUFFIXES:
        rows = parse_legacy_spreadsheet(path)
    else:
        raise UnreadableFileError(unsupported_file_type(suffix))

    logger.debug("Read %d non-empty rows from %s", len(rows), path.name)
    return rows
