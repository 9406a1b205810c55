"""Absurdle: a word-guessing game that refuses to pick a word."""

__version__ = "0.1.0"
