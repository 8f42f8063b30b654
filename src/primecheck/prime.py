"""Primality test by trial division with odd divisors up to sqrt(n)."""

from __future__ import annotations

import enum
import logging
import math
import operator
from dataclasses import dataclass
from typing import Optional

from .config import get_config

logger = logging.getLogger(__name__)


class PrimeDomainError(ValueError):
    pass


class Branch(enum.IntEnum):
    BELOW_TWO = 1
    TWO = 2
    EVEN = 3
    DIVISOR_FOUND = 4
    NO_DIVISOR = 5


@dataclass(frozen=True)
class PrimalityVerdict:
    n: int
    is_prime: bool
    branch: Branch
    divisor: Optional[int] = None
    limit: Optional[int] = None


def divisor_search_limit(n: int) -> int:
    """Largest integer whose square does not exceed ``n``; 0 for negative ``n``."""
    n = operator.index(n)
    if n < 0:
        return 0
    # isqrt is exact, so perfect squares like 49 give 7 rather than 6
    return math.isqrt(n)


def _coerce(n) -> int:
    try:
        value = operator.index(n)
    except TypeError:
        raise TypeError(f"expected an integer, got {type(n).__name__}") from None
    cfg = get_config()
    if cfg is not None:
        bounds = cfg.bounds()
        if bounds is not None:
            low, high = bounds
            if not low <= value <= high:
                raise PrimeDomainError(f"{value} is outside the {cfg.int_bits}-bit signed range [{low}, {high}]")
    return value


def _check_impl(n: int) -> PrimalityVerdict:
    if n < 2:
        return PrimalityVerdict(n, False, Branch.BELOW_TWO)
    if n == 2:
        return PrimalityVerdict(n, True, Branch.TWO)
    if n % 2 == 0:
        return PrimalityVerdict(n, False, Branch.EVEN)

    limit = divisor_search_limit(n)
    for d in range(3, limit + 1, 2):
        if n % d == 0:
            return PrimalityVerdict(n, False, Branch.DIVISOR_FOUND, divisor=d, limit=limit)
    return PrimalityVerdict(n, True, Branch.NO_DIVISOR, limit=limit)


def check(n: int) -> PrimalityVerdict:
    """Run the primality test and report which branch decided the answer.

    The divisor search walks odd candidates in ascending order and stops at the
    first one that divides ``n``, so ``divisor`` is the smallest odd factor.
    """
    verdict = _check_impl(_coerce(n))
    cfg = get_config()
    if cfg is not None and cfg.log_decisions:
        if verdict.divisor is not None:
            logger.info("n=%d branch=%s divisor=%d limit=%d", verdict.n, verdict.branch.name, verdict.divisor, verdict.limit)
        elif verdict.limit is not None:
            logger.info("n=%d branch=%s limit=%d", verdict.n, verdict.branch.name, verdict.limit)
        else:
            logger.info("n=%d branch=%s", verdict.n, verdict.branch.name)
    return verdict


def is_prime(n: int) -> bool:
    return check(n).is_prime
