import functools
import subprocess
from logging import Logger

from retag.utils import logger
from retag.utils.exceptions import GenericSubprocessError

log: Logger = logger.setup(name="Exception")


def subprocess_error_handler(logging_message: str):
    """A decorator to wrap a function that runs an external process. When the
    process fails, it logs the specified error message along with anything the
    process printed, and raises a GenericSubprocessError exception.

    A missing executable is reported the same way, since subprocess raises
    FileNotFoundError rather than a SubprocessError in that case.

    Args:
        logging_message (str): The error message to be logged.

    Returns:
        function: The decorator.
    """

    def decorate(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except subprocess.CalledProcessError as e:
                log.error(f"{logging_message}: exit code {e.returncode}")
                if e.output:
                    log.error(e.output.strip())
                # prevent exception chaining by using from None
                raise GenericSubprocessError() from None
            except subprocess.SubprocessError:
                log.error(logging_message)
                raise GenericSubprocessError() from None
            except FileNotFoundError as e:
                log.error(f"{logging_message}: {e.filename} not found")
                raise GenericSubprocessError() from None

        return wrapper

    return decorate
