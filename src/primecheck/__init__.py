"""Public package API for primecheck."""

from .config import CheckerConfig, ConfigError, clear_config, configure_checker, get_config
from .prime import Branch, PrimalityVerdict, PrimeDomainError, check, divisor_search_limit, is_prime

__all__ = [
    "configure_checker",
    "get_config",
    "clear_config",
    "CheckerConfig",
    "ConfigError",
    "is_prime",
    "check",
    "divisor_search_limit",
    "Branch",
    "PrimalityVerdict",
    "PrimeDomainError",
]
