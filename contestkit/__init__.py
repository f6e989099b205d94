"""Competitive-programming problem solutions as plain Python functions."""

__version__ = "0.1.0"