"""Splitting of input lines into command words."""

import re

_SEPARATORS = re.compile(r"[ \t\n]+")


def split_line(line):
    """Split a line into words separated by spaces, tabs and newlines.

    Runs of separators count as one, and leading or trailing separators
    produce no empty words.
    """
    return [word for word in _SEPARATORS.split(line) if word]