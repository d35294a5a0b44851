"""mrdle: a terminal word-guessing game and solution finder."""

__version__ = "0.2.0"
