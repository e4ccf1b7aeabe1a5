"""Styled Excel output for deal flow reports."""
from .formatters import NUMBER_FORMATS, UNDISCLOSED, fit_columns, kpi_card, style_header, write_value
from .writer import DealWorkbook
