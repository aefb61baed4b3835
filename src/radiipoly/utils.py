"""
Small functions used everywhere.
"""

import sys
import io
from functools import wraps

_COLORS = {
    "black": "\033[30m",
    "red": "\033[91m",
    "green": "\033[92m",
    "blue": "\033[94m",
    "yellow": "\033[93m",
}


def cprint(
    text: str,
    new_line: bool = True,
    bold: bool = False,
    color: str | None = None,
):
    """
    Print text with color and style.

    Args:
        text (str): The text to print.
        new_line (bool): Whether to end the line after the text.
        bold (bool): Whether to print the text in bold.
        color (str | None): One of black, red, green, blue, yellow. Defaults to the terminal color.
    """
    style_prefix = "\033[1m" if bold else ""
    if color is not None:
        style_prefix += _COLORS[color]

    end = "\n" if new_line else " "

    if style_prefix == "":
        print(text, end=end)
    else:
        print(style_prefix + text + "\033[0m", end=end)


class Verbosity:
    def __init__(self, verbose=True):
        """Silence stdout inside a with-block unless verbose."""
        self.verbose = verbose
        self.null_output = io.StringIO()

    def __enter__(self):
        self.original_stdout = sys.stdout
        sys.stdout = sys.stdout if self.verbose else self.null_output
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        sys.stdout = self.original_stdout


def verbosity(func):
    """Decorator adding a ``verbose`` keyword (default True) that silences the printed output of func."""

    @wraps(func)
    def wrapped(*args, **kwargs):
        verbose = kwargs.get("verbose", True)
        with Verbosity(verbose):
            return func(*args, **kwargs)

    return wrapped
