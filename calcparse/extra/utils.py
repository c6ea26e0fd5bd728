import math
from functools import wraps


def format_number(value: float) -> str:
    """
    Formats a float the short way: integral values lose their '.0'
    :param value: number to format
    :return: string representation
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def log_exception(func):

    """Decorator to automatically log exceptions"""

    @wraps(func)
    def wrapper(self, *args, **kwargs):

        try:
            return func(self, *args, **kwargs)
        except Exception as e:
            self.logger.debug(f"Exception in {func.__name__}: {e}", exc_info=True)
            raise

    return wrapper
