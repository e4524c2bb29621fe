"""Arcade platform with a curses display, a menu and Snake and Nibbler games."""

__version__ = "0.1.0"