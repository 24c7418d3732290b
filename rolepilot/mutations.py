"""
Outcome reporting shared by the job and bullet mutation handlers.
"""
import enum
import logging
from typing import Callable

from django.conf import settings
from django.contrib import messages
from django.db import DatabaseError

from .revalidate import revalidate_path

logger = logging.getLogger(__name__)


class MutationResult(enum.Enum):
    """What a mutation handler did with a form submission."""

    APPLIED = 'applied'
    SKIPPED_UNAUTHENTICATED = 'skipped_unauthenticated'
    SKIPPED_INVALID = 'skipped_invalid'
    STORE_ERROR = 'store_error'


def run_write(user, action: str, write: Callable[[], int]) -> MutationResult:
    """
    Perform one database write for `user` and refresh the app page.

    `write` returns the number of rows it affected. Database failures are
    logged and reported as STORE_ERROR instead of propagating to the view.
    """
    try:
        rows = write()
    except DatabaseError:
        logger.exception("%s failed for user %s", action, user.id)
        result = MutationResult.STORE_ERROR
    else:
        logger.info("%s affected %d row(s) for user %s", action, rows, user.id)
        result = MutationResult.APPLIED

    revalidate_path(settings.ROLEPILOT_APP_PATH, user.id)
    return result


def skip_invalid(user, action: str) -> MutationResult:
    logger.debug("%s skipped: missing required fields (user %s)", action, user.id)
    revalidate_path(settings.ROLEPILOT_APP_PATH, user.id)
    return MutationResult.SKIPPED_INVALID


STORE_ERROR_MESSAGE = "We couldn't save your changes. Please try again."


def flash_result(request, result: MutationResult) -> None:
    """
    Surface a mutation outcome to the browser.

    Only store failures are shown; skipped submissions stay silent.
    """
    if result is MutationResult.STORE_ERROR:
        messages.error(request, STORE_ERROR_MESSAGE)
