"""File format handlers for activity data files (TCX)."""

from .tcx import TcxParseError, parse, parse_file

__all__ = ["TcxParseError", "parse", "parse_file"]
