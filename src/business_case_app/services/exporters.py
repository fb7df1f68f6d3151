"""Tabular exports of a scenario result (CSV, XLSX, PDF)."""
from __future__ import annotations

import io
import logging
import re
from functools import partial
from typing import Callable, Dict, List
from urllib.parse import quote

import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ..config import DEFAULT_CURRENCY, EXPORT_SHEET_NAME
from ..errors import UnsupportedExportFormatError
from ..models.results import ScenarioResult
from .formatting import fmt_break_even, fmt_currency, fmt_payback, fmt_pct

logger = logging.getLogger(__name__)

COLUMNS: Dict[str, str] = {
    "year": "Year",
    "price_per_unit": "Price per unit",
    "units": "Units",
    "revenue": "Revenue",
    "variable_cost": "Variable cost",
    "gross_profit": "Gross profit",
    "gross_margin_pct": "Gross margin %",
    "fixed_cost": "Fixed cost",
    "net_profit": "Net profit",
    "net_margin_pct": "Net margin %",
    "cumulative_cash_flow": "Cumulative cash flow",
}

MEDIA_TYPES: Dict[str, str] = {
    "csv": "text/csv; charset=utf-8",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "pdf": "application/pdf",
}

HEADER_FILL = PatternFill(start_color="1F4E79", end_color="1F4E79", fill_type="solid")


def build_rows(result: ScenarioResult) -> List[Dict[str, float]]:
    rows = []
    for year in result.yearly:
        data = year.model_dump()
        rows.append({label: data[field] for field, label in COLUMNS.items()})
    return rows


def results_frame(result: ScenarioResult) -> pd.DataFrame:
    return pd.DataFrame(build_rows(result), columns=list(COLUMNS.values()))


def export_filename(result: ScenarioResult, fmt: str) -> str:
    return f"{result.scenario.name}_scenario.{fmt}"


def export_csv(result: ScenarioResult) -> bytes:
    return results_frame(result).to_csv(index=False).encode("utf-8")


def export_xlsx(result: ScenarioResult) -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = EXPORT_SHEET_NAME
    headers = list(COLUMNS.values())
    ws.append(headers)
    for cell in ws[1]:
        cell.font = Font(bold=True, color="FFFFFF")
        cell.fill = HEADER_FILL
    for row in build_rows(result):
        ws.append([row[h] for h in headers])
    for idx, header in enumerate(headers, start=1):
        ws.column_dimensions[get_column_letter(idx)].width = max(12, len(header) + 2)
    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


def export_pdf(result: ScenarioResult, currency: str = DEFAULT_CURRENCY) -> bytes:
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=A4, leftMargin=0.75 * inch, rightMargin=0.75 * inch)
    styles = getSampleStyleSheet()
    horizon = len(result.yearly)

    elements = [
        Paragraph(f"Business Case - {result.scenario.name} scenario", styles["Heading1"]),
        Paragraph(f"Total revenue ({horizon}y): {fmt_currency(result.total_revenue, currency)}", styles["Normal"]),
        Paragraph(f"Total net profit ({horizon}y): {fmt_currency(result.total_net_profit, currency)}", styles["Normal"]),
        Paragraph(f"Payback year: {fmt_payback(result.payback_year)}", styles["Normal"]),
        Paragraph(f"Break-even units: {fmt_break_even(result.break_even_units)}", styles["Normal"]),
        Spacer(1, 0.25 * inch),
    ]

    table_rows = [["Year", "Price", "Units", "Revenue", "Net profit", "Net margin"]]
    for year in result.yearly:
        table_rows.append(
            [
                f"Y{year.year}",
                f"{year.price_per_unit:,.2f}",
                f"{year.units:,.0f}",
                f"{year.revenue:,.0f}",
                f"{year.net_profit:,.0f}",
                fmt_pct(year.net_margin_pct),
            ]
        )
    table = Table(table_rows, repeatRows=1)
    table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#1f4e79")),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("FONTSIZE", (0, 0), (-1, -1), 8),
                ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#f5f5f5")]),
                ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
            ]
        )
    )
    elements.append(table)
    doc.build(elements)
    return buffer.getvalue()


EXPORTERS: Dict[str, Callable[..., bytes]] = {
    "csv": export_csv,
    "xlsx": export_xlsx,
    "pdf": export_pdf,
}


def export(result: ScenarioResult, fmt: str, currency: str = DEFAULT_CURRENCY) -> bytes:
    fmt = fmt.lower()
    exporter = EXPORTERS.get(fmt)
    if exporter is None:
        raise UnsupportedExportFormatError(fmt)
    if fmt == "pdf":
        exporter = partial(exporter, currency=currency)
    logger.info(f"Exporting {result.scenario.name} scenario as {fmt}")
    return exporter(result)


def content_disposition(filename: str) -> str:
    """Attachment header with an ASCII fallback and an RFC 5987 UTF-8 name."""
    fallback = re.sub(r"[^A-Za-z0-9._ -]", "_", filename)
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"
