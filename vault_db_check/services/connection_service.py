"""Connection verification stage."""

from typing import Any, Callable

import psycopg2

from ..db.db_config import DatabaseConfig
from ..exceptions import DatabaseConnectionError
from ..results import ConnectionCheckResult, ConnectionStatus
from ..utils import get_logger

Connect = Callable[[str], Any]


def verify_connection(
    config: DatabaseConfig, connect: Connect = psycopg2.connect
) -> ConnectionCheckResult:
    """
    Open one connection with the config's connection string and close it.

    Args:
        config: Database config, normally already enriched with credentials
        connect: Driver entry point taking a libpq connection string

    Returns:
        ConnectionCheckResult; any error raised while connecting becomes an
        ``error`` result
    """
    logger = get_logger()
    extra = {"db_host": config.host, "db_port": config.port, "dbname": config.database}

    try:
        connection = connect(config.get_connection_string())
    except Exception as e:
        # psycopg2 raises ValueError, not psycopg2.Error, for a DSN with a NUL byte
        error = DatabaseConnectionError(str(e).strip(), cause=e, **extra)
        return ConnectionCheckResult(status=ConnectionStatus.ERROR, error_message=error.message)

    try:
        # psycopg2 reports 0 for an open connection
        is_open = connection.closed == 0
    finally:
        connection.close()

    if is_open:
        logger.info("Database connection opened", extra=extra)
        return ConnectionCheckResult(status=ConnectionStatus.CONNECTED)

    logger.warning("Database connection is not open", extra=extra)
    return ConnectionCheckResult(status=ConnectionStatus.NOT_CONNECTED)
