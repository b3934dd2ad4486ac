"""Error boundary handling for CLI commands.

Catches DmenvError at command entry points and displays a clean error
message without a stack trace. All other exceptions bubble up normally.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any

from dmenv.cli.output import print_error
from dmenv.core.errors import DmenvError

logger = logging.getLogger(__name__)


def cli_error_boundary[T: Callable[..., Any]](func: T) -> T:
    """Decorator turning DmenvError into `Error: <message>` and exit code 1.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except DmenvError as e:
            logger.debug("Command failed", exc_info=True)
            print_error(e.message)
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
