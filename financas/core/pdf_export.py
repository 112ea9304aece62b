# financas/core/pdf_export.py
import datetime
import io
from typing import List

import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer

from financas.core.models import Transaction
from financas.core.money import format_brl
from financas.core.reports import report_total
from financas.utils.text_utils import format_date_br

HEADER = ["Data", "Descrição", "Categoria", "Valor"]


def report_frame(transactions: List[Transaction]) -> pd.DataFrame:
    """Linhas da tabela do relatório, na mesma ordem em que vieram do banco."""
    df = pd.DataFrame(
        [{
            'data': format_date_br(t.date),
            'descricao': t.description or '',
            'categoria': t.category_name or '-',
            'valor': format_brl(t.amount),
        } for t in transactions],
        columns=['data', 'descricao', 'categoria', 'valor'],
    )
    return df


def build_month_report_pdf(transactions: List[Transaction], month: str,
                           generated_on: datetime.date) -> bytes:
    """Gera o PDF do relatório mensal: título, período, tabela e linha de total."""
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer, pagesize=A4,
        leftMargin=14*mm, rightMargin=14*mm,
        topMargin=14*mm, bottomMargin=14*mm,
        title=f"Relatório Financeiro {month}",
    )
    styles = getSampleStyleSheet()

    elements = [
        Paragraph("Relatório Financeiro Mensal", styles["Title"]),
        Paragraph(f"Período: {month}", styles["Normal"]),
        Paragraph(f"Gerado em: {generated_on.strftime('%d/%m/%Y')}", styles["Normal"]),
        Spacer(1, 8),
    ]

    df = report_frame(transactions)
    rows = df.values.tolist()
    rows.append(["", "", "TOTAL", format_brl(report_total(transactions))])

    tbl = Table([HEADER] + rows, colWidths=[25*mm, 75*mm, 45*mm, 35*mm], repeatRows=1)
    tbl.setStyle(TableStyle([
        ('FONT', (0, 0), (-1, 0), 'Helvetica-Bold', 10),
        ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor("#8b5cf6")),
        ('TEXTCOLOR', (0, 0), (-1, 0), colors.white),
        ('FONT', (0, 1), (-1, -1), 'Helvetica', 9),
        ('ALIGN', (3, 1), (3, -1), 'RIGHT'),
        ('GRID', (0, 0), (-1, -1), 0.5, colors.HexColor("#C8D2DC")),
        # linha de total
        ('FONT', (0, -1), (-1, -1), 'Helvetica-Bold', 9),
        ('BACKGROUND', (0, -1), (-1, -1), colors.HexColor("#1e293b")),
        ('TEXTCOLOR', (0, -1), (-1, -1), colors.white),
        ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
    ]))
    elements.append(tbl)

    doc.build(elements)
    pdf_bytes = buffer.getvalue()
    buffer.close()
    return pdf_bytes
