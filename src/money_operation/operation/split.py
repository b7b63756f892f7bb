from __future__ import annotations

import logging

from money_operation.config import DEFAULT_SPLIT_TRIES
from money_operation.domain.monetary.money import Money
from money_operation.domain.monetary.rounding import DEFAULT_ROUNDING_MODE, RoundingMode
from money_operation.errors import InvalidArgumentError, ReconciliationFailedError
from money_operation.operation.aggregate import assert_split, join

logger = logging.getLogger(__name__)


def split(
    subject: Money,
    times: int,
    rounding_mode: RoundingMode = DEFAULT_ROUNDING_MODE,
    tries: int = DEFAULT_SPLIT_TRIES,
) -> list[Money]:
    """Split $subject into $times parts that add up to $subject exactly.

    Every part starts as `subject / times` rounded with $rounding_mode. While the parts do not
    add up to $subject, the first part is nudged by one minor unit towards the target (up when
    the sum is short, down when it overshoots). The remainder therefore always lands on index 0,
    so equal inputs always give equal outputs.

    Args:
        subject: Value to split.
        times: Number of parts, >= 1.
        rounding_mode: Rounding of the initial per-part division.
        tries: Maximum number of one-unit nudges before giving up, >= 0.

    Returns:
        list[Money]: Exactly $times parts with `join(parts) == subject`.

    Raises:
        InvalidArgumentError: If $times < 1 or $tries < 0.
        ReconciliationFailedError: If $tries nudges were not enough.

    Examples:
        >>> split(Money(1000, EUR), 3)  # [334, 333, 333]
        >>> split(Money(288, EUR), 5)  # [56, 58, 58, 58, 58]
    """
    # Raise: at least one part is needed
    if not isinstance(times, int) or isinstance(times, bool) or times < 1:
        raise InvalidArgumentError(f"Cannot call `split` because $times must be >= 1, {times} given")

    # Raise: negative budget has no meaning
    if not isinstance(tries, int) or isinstance(tries, bool) or tries < 0:
        raise InvalidArgumentError(f"Cannot call `split` because $tries must be >= 0, {tries} given")

    part = subject.divide(times, rounding_mode)
    parts = [part] * times
    logger.debug(f"Split {subject} into {times} part(s) of {part} using {rounding_mode.name}")

    unit = Money(1, subject.currency)
    remaining_tries = tries
    while not assert_split(subject, parts):
        if remaining_tries == 0:
            logger.error(f"Could not reconcile split of {subject} into {times} part(s) within {tries} tries; current sum is {join(parts)}")
            raise ReconciliationFailedError(subject.amount, times)

        if join(parts).less_than(subject):
            parts[0] = parts[0].add(unit)
        else:
            parts[0] = parts[0].subtract(unit)

        remaining_tries -= 1
        logger.debug(f"Nudged first part of split of {subject} to {parts[0]}; {remaining_tries} tries left")

    return parts
