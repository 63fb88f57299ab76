"""Config loading stage."""

from pathlib import Path
from typing import Union

from ..db.db_config import read_database_config
from ..exceptions import ConfigurationError
from ..results import ConfigLoadResult


def load_database_config(path: Union[str, Path]) -> ConfigLoadResult:
    """
    Load the database config file into a result.

    IO, JSON and validation failures are returned as a failed result whose
    message is the underlying error's text.
    """
    try:
        return ConfigLoadResult.success_result(read_database_config(path))
    except ConfigurationError as e:
        return ConfigLoadResult.failure_result(e.message, error_code=e.error_code.value)
