"""Uploaded workbook decoding into raw worksheet rows."""

from __future__ import annotations

import logging
from io import BytesIO
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from manifest_importer.import_failures import WorkbookDecodeError

from .manifest_models import WorksheetRows

logger = logging.getLogger(__name__)


def decode_workbook(content: bytes) -> tuple[WorksheetRows, ...]:
    """Return the cell values of every worksheet in the uploaded workbook.

    Raises:
      WorkbookDecodeError: The content is not a readable xlsx workbook.
    """
    if not content:
        raise WorkbookDecodeError("Uploaded file is empty.")
    try:
        workbook = load_workbook(BytesIO(content), data_only=True, read_only=True)
    except (BadZipFile, InvalidFileException, SyntaxError, KeyError, OSError, ValueError) as exc:
        raise WorkbookDecodeError(f"Workbook could not be read: {exc}") from exc

    # Read-only worksheets parse their XML lazily, during row iteration;
    # ElementTree and lxml parse errors both derive from SyntaxError.
    try:
        sheets = tuple(
            WorksheetRows(
                sheet_name=worksheet.title,
                rows=tuple(tuple(row) for row in worksheet.iter_rows(values_only=True)),
            )
            for worksheet in workbook.worksheets
        )
    except (SyntaxError, BadZipFile, KeyError, OSError, ValueError, TypeError) as exc:
        raise WorkbookDecodeError(f"Worksheet could not be read: {exc}") from exc
    finally:
        workbook.close()

    if not sheets:
        raise WorkbookDecodeError("Workbook contains no worksheets.")
    logger.debug("Decoded workbook with sheets %s", [sheet.sheet_name for sheet in sheets])
    return sheets
