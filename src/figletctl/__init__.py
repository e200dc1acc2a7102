"""figletctl - Print a message as large FIGlet text.

figletctl is a CLI tool that renders a text message with the built-in FIGlet
"standard" font and prints the resulting figure to standard output.

Example:
    $ figletctl "HI"
     _   _ ___
    | | | |_ _|
    | |_| || |
    |  _  || |
    |_| |_|___|
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
