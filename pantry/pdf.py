"""PDF receipts for shopping list totals using ReportLab."""

from __future__ import annotations

import logging
from pathlib import Path

from .totals.calculator import TotalsCalculator, TotalsResult

logger = logging.getLogger(__name__)

# Unicode-capable fonts for non-Latin currency symbols (€, ₹, ₩ ...)
_FONT_SEARCH_PATHS = [
    # DejaVu (Debian/Ubuntu, Fedora)
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu-sans-fonts/DejaVuSans.ttf",
    # Noto Sans
    "/usr/share/fonts/truetype/noto/NotoSans-Regular.ttf",
    "/usr/share/fonts/noto/NotoSans-Regular.ttf",
    # Liberation
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    # macOS
    "/Library/Fonts/Arial Unicode.ttf",
    "/System/Library/Fonts/Supplemental/Arial Unicode.ttf",
]

_FALLBACK_FONT = "Helvetica"


def _find_unicode_font() -> str | None:
    for path in _FONT_SEARCH_PATHS:
        if Path(path).exists():
            return path
    return None


def _register_font() -> str:
    """Register a Unicode font with ReportLab and return the font name."""
    from reportlab.pdfbase import pdfmetrics
    from reportlab.pdfbase.ttfonts import TTFont

    font_path = _find_unicode_font()
    if font_path is None:
        logger.info("No Unicode font found, using %s", _FALLBACK_FONT)
        return _FALLBACK_FONT

    font_name = "PantryFont"
    pdfmetrics.registerFont(TTFont(font_name, font_path))
    return font_name


def render_totals_pdf(
    result: TotalsResult,
    calculator: TotalsCalculator,
    output_path: str | Path,
    title: str = "Shopping List Totals",
) -> Path:
    """Render a shopping list totals receipt as a PDF file.

    Args:
        result: Totals from ``TotalsCalculator.calculate_totals``.
        calculator: The calculator that produced *result*; its currency
            settings format the amounts.
        output_path: Where to save the PDF file.
        title: Heading printed at the top of the page.

    Returns:
        Path to the generated PDF file.

    Raises:
        ImportError: If reportlab is not installed.
    """
    try:
        from reportlab.lib import colors
        from reportlab.lib.pagesizes import A4
        from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
        from reportlab.lib.units import mm
        from reportlab.platypus import (
            Paragraph,
            SimpleDocTemplate,
            Spacer,
            Table,
            TableStyle,
        )
    except ImportError:
        raise ImportError(
            "reportlab is required: pip install 'pantry-kit[pdf]'"
        )

    summary = calculator.generate_summary(result)
    font_name = _register_font()
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    doc = SimpleDocTemplate(
        str(output_path),
        pagesize=A4,
        leftMargin=15 * mm,
        rightMargin=15 * mm,
        topMargin=15 * mm,
        bottomMargin=15 * mm,
    )

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "Title_Pantry",
        parent=styles["Title"],
        fontName=font_name,
        fontSize=18,
        leading=24,
    )
    subtitle_style = ParagraphStyle(
        "Subtitle_Pantry",
        parent=styles["Normal"],
        fontName=font_name,
        fontSize=10,
        leading=14,
        textColor=colors.grey,
    )
    heading_style = ParagraphStyle(
        "Heading_Pantry",
        parent=styles["Heading2"],
        fontName=font_name,
        fontSize=14,
        leading=20,
        spaceAfter=4 * mm,
    )
    body_style = ParagraphStyle(
        "Body_Pantry",
        parent=styles["Normal"],
        fontName=font_name,
        fontSize=9,
        leading=13,
    )

    def table_style(header: str, stripe: str) -> TableStyle:
        return TableStyle([
            ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor(header)),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
            ("FONTNAME", (0, 0), (-1, -1), font_name),
            ("FONTSIZE", (0, 0), (-1, -1), 9),
            ("ALIGN", (0, 0), (0, -1), "LEFT"),
            ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
            ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor(stripe)]),
            ("TOPPADDING", (0, 0), (-1, -1), 3),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
            ("LEFTPADDING", (0, 0), (-1, -1), 4),
            ("RIGHTPADDING", (0, 0), (-1, -1), 4),
        ])

    elements: list = []

    # Title
    elements.append(Paragraph(title, title_style))
    elements.append(Paragraph(
        f"{summary.total_items} items, calculated "
        f"{summary.calculated_at:%Y-%m-%d %H:%M} UTC",
        subtitle_style,
    ))
    elements.append(Spacer(1, 6 * mm))

    # Totals
    rows = [["", "Amount"], ["Subtotal", summary.subtotal]]
    if result.tax_amount > 0:
        rows.append([f"Tax ({calculator.tax_rate * 100:.1f}%)", summary.tax])
    if result.discount_amount > 0:
        rows.append(["Discount", f"-{summary.discount}"])
    if result.coupon_amount > 0:
        rows.append(["Coupons", f"-{summary.coupon}"])
    rows.append(["TOTAL", summary.total])
    t = Table(rows, colWidths=[90 * mm, 50 * mm])
    t.setStyle(table_style("#4A90D9", "#F5F5F5"))
    elements.append(t)
    elements.append(Spacer(1, 6 * mm))

    # Budget
    if summary.budget:
        elements.append(Paragraph("Budget", heading_style))
        rows = [
            ["", "Amount"],
            ["Budget", summary.budget],
            ["Remaining", summary.budget_remaining],
            ["Used", f"{summary.budget_percent_used}%"],
        ]
        t = Table(rows, colWidths=[90 * mm, 50 * mm])
        budget_header = "#C0392B" if summary.is_over_budget else "#27AE60"
        t.setStyle(table_style(budget_header, "#F5F5F5"))
        elements.append(t)
        elements.append(Spacer(1, 6 * mm))

    # Categories
    if summary.categories:
        elements.append(Paragraph("Category Breakdown", heading_style))
        rows = [["Category", "Items", "Subtotal", "Tax", "Total"]]
        for cat in summary.categories:
            rows.append([
                cat.name,
                str(cat.item_count),
                cat.formatted_subtotal,
                cat.formatted_tax,
                cat.formatted_total,
            ])
        t = Table(rows, colWidths=[50 * mm, 20 * mm, 35 * mm, 30 * mm, 35 * mm])
        t.setStyle(table_style("#E67E22", "#FFF3E0"))
        elements.append(t)
        elements.append(Spacer(1, 6 * mm))

    # Notes
    if summary.warnings:
        elements.append(Paragraph("Notes", heading_style))
        for warning in summary.warnings:
            elements.append(Paragraph(f"• {warning}", body_style))

    doc.build(elements)
    logger.info("Wrote totals PDF to %s", output_path)
    return output_path
