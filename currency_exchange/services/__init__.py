"""Entrypoint handlers."""
from .compare import compare
from .convert import convert
from .history import history
from .latest import overview, rates
from .report import report

__all__ = ["compare", "convert", "history", "overview", "rates", "report"]
