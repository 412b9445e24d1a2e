"""Restify Boost — scaffold Laravel Restify repositories from project conventions."""

__version__ = "0.1.0"
