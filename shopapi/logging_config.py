import logging.config
import sys


def _logger(level: str, *handlers: str) -> dict:
    return {"handlers": list(handlers), "level": level, "propagate": False}


def setup_logging(log_level: str = "INFO", log_sql: bool = False):
    """stdout에는 전체 로그, stderr에는 WARNING 이상을 위치 정보와 함께 남긴다.

    log_sql이 켜지면 SQLAlchemy가 실행하는 쿼리도 INFO로 출력한다.
    """
    log_level = log_level.upper()
    sql_level = "INFO" if log_sql else "WARNING"

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "line": {
                    "format": "%(asctime)s | %(levelname)-8s | %(name)-28s | %(message)s",
                },
                "located": {
                    "format": "%(asctime)s | %(levelname)-8s | %(name)s "
                    "(%(module)s.%(funcName)s:%(lineno)d)\n%(message)s",
                },
            },
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "formatter": "line",
                    "stream": sys.stdout,
                },
                "stderr": {
                    "class": "logging.StreamHandler",
                    "formatter": "located",
                    "stream": sys.stderr,
                    "level": "WARNING",
                },
            },
            "root": {"handlers": ["stdout"], "level": log_level},
            "loggers": {
                "shopapi": _logger(log_level, "stdout", "stderr"),
                "uvicorn.error": _logger(log_level, "stdout", "stderr"),
                "uvicorn.access": _logger(log_level, "stdout"),
                "sqlalchemy.engine": _logger(sql_level, "stdout"),
            },
        }
    )
