"""Cardiac troponin cohort: data preparation and a four-panel summary figure."""

from .charts import build_figure
from .data import prepare_troponin

__all__ = ["build_figure", "prepare_troponin"]
