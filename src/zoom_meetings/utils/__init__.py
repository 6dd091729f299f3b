"""Utility helpers."""

from .dates import format_date, month_chunks, to_date, whole_months_between

__all__ = ["format_date", "month_chunks", "to_date", "whole_months_between"]
