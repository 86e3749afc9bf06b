from ._main import build_parser, join_time_values, main, run
from ._render import render

__all__ = ["build_parser", "join_time_values", "main", "render", "run"]
