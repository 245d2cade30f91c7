from logging.config import dictConfig

from tabula.utils.env import getenv_bool

__all__ = ("setup_logging",)


def setup_logging(
    *,
    time: bool = True,
    debug: bool = getenv_bool("DEBUG_LOGGING", __debug__),
) -> None:
    """\
    Route tabula records to the standard error stream.

    tabula only emits DEBUG records, currently one for each freeze. Loggers
    of the host application are left untouched, the "tabula" logger stops
    propagating to avoid printing its records twice.

    Parameters
    ----------
    time: bool = True
        include timestamps in records.
    debug: bool = DEBUG_LOGGING env or __debug__
        show DEBUG records, otherwise only INFO and above.
    """
    level: str = "DEBUG" if debug else "INFO"
    layout: str = "[%(levelname)s] [%(name)s] %(message)s"
    dictConfig(
        config={
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "tabula": {
                    "format": f"%(asctime)s {layout}" if time else layout,
                },
            },
            "handlers": {
                "tabula": {
                    "level": level,
                    "formatter": "tabula",
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": {
                "tabula": {
                    "handlers": ["tabula"],
                    "level": level,
                    "propagate": False,
                },
            },
        },
    )
