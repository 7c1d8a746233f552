"""Greetings, number and text helpers, a dictionary, a wallet, shapes and console games."""

__version__ = "0.1.0"