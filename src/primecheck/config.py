"""Checker configuration and validation for primecheck."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckerConfig:
    int_bits: Optional[int] = None
    log_decisions: bool = False

    def bounds(self):
        """Return the inclusive (low, high) domain, or None when unbounded."""
        if self.int_bits is None:
            return None
        half = 1 << (self.int_bits - 1)
        return -half, half - 1

_CONFIG: Optional[CheckerConfig] = None

class ConfigError(ValueError):
    pass

#settings are validated here and put in an instance of CheckerConfig
def configure_checker(
    *,
    int_bits: Optional[int] = None,
    log_decisions: bool = False,
) -> CheckerConfig:
    """Configure the primality checker.

    ``int_bits`` restricts the accepted domain to the signed integer range of
    that width (32 matches a C# ``int`` parameter). Leave it unset to accept
    any Python integer.
    """
    if int_bits is not None:
        if isinstance(int_bits, bool) or not isinstance(int_bits, int):
            raise ConfigError("int_bits must be an integer if set")
        if int_bits < 2:
            raise ConfigError("int_bits must be at least 2")
    if not isinstance(log_decisions, bool):
        raise ConfigError("log_decisions must be a bool")

    cfg = CheckerConfig(int_bits=int_bits, log_decisions=log_decisions)

    global _CONFIG
    _CONFIG = cfg
    logger.debug("checker configured: int_bits=%s log_decisions=%s", int_bits, log_decisions)
    return cfg

def get_config() -> Optional[CheckerConfig]:
    return _CONFIG

def clear_config() -> None:
    global _CONFIG
    _CONFIG = None
