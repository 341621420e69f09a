"""syn - open files with 'Synalyze It!' and 'Hex Fiend' from one command."""

__version__ = "1.0.0"
