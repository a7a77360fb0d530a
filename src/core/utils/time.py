"""
Time-related utilities for the application.

Catalog dates are stored as local wall-clock strings in the fixed
format ``YYYY-MM-DD HH:MM:SS`` and exposed to clients as integer
seconds since the epoch. JavaScript clients multiply by 1000:
``new Date(1000 * timestamp)``.
"""

import time

from aws_lambda_powertools import Logger

from core.utils.constants import CATALOG_DATE_FORMAT

logger = Logger(UTC=True)


def date_to_timestamp(value: str | None) -> int:
    """Convert a catalog date string into epoch seconds.

    Example:
        "2014-11-24 01:40:22" -> seconds for that local time

    Empty or unparsable values yield 0 instead of raising, so a bad
    date never fails a request.
    """
    if not value:
        return 0

    try:
        parsed = time.strptime(value.strip(), CATALOG_DATE_FORMAT)
        return int(time.mktime(parsed))
    except (ValueError, OverflowError):
        logger.debug("Unparsable catalog date", extra={"value": value})
        return 0
