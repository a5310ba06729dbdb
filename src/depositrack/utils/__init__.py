"""Utility functions for depositrack."""

from depositrack.utils.amount_parser import parse_amount

__all__ = ["parse_amount"]
