from tabula.utils.env import getenv, getenv_bool, getenv_int, getenv_str
from tabula.utils.logs import setup_logging
from tabula.utils.randomness import RandomSource, fisher_yates, shared_random

__all__ = (
    "RandomSource",
    "fisher_yates",
    "getenv",
    "getenv_bool",
    "getenv_int",
    "getenv_str",
    "setup_logging",
    "shared_random",
)
