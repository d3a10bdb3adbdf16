"""Loading of Lighthouse results (LHR) files.

Only the ``timing.entries`` array is extracted; the rest of the document is
validated away by `LighthouseResult`.
"""
from __future__ import annotations

import json
import logging
import os
from typing import List, Union

from pydantic import ValidationError

from .errors import InvalidResultsError, ResultsNotFoundError
from .models.timing import LighthouseResult, TimingEntry

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def load_lighthouse_result(path: PathLike) -> LighthouseResult:
    """Read and validate a Lighthouse results file.

    Args:
        path: Location of the LHR JSON file.

    Returns:
        The parsed `LighthouseResult`.

    Raises:
        ResultsNotFoundError: ``path`` does not exist.
        InvalidResultsError: the file cannot be read, is not UTF-8 JSON or
            lacks ``timing.entries``.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError as e:
        raise ResultsNotFoundError(f"Lighthouse JSON results not found: {path}") from e
    except OSError as e:
        raise InvalidResultsError(f"Lighthouse JSON results could not be read: {e}") from e
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError
        raise InvalidResultsError(f"Lighthouse JSON results could not be parsed: {e}") from e

    try:
        return LighthouseResult.model_validate(raw)
    except ValidationError as e:
        logger.debug("LHR validation failed for %s: %s", path, e)
        raise InvalidResultsError(
            "Lighthouse JSON results do not contain timing.entries"
        ) from e


def load_timing_entries(path: PathLike) -> List[TimingEntry]:
    """Return the ordered user-timing entries from a results file."""
    result = load_lighthouse_result(path)
    logger.debug("Loaded %d timing entries from %s", len(result.timing.entries), path)
    return result.timing.entries


__all__ = ["load_lighthouse_result", "load_timing_entries"]
