"""Exports for the passive-income strategy: a summary table, CSV and PDF."""

from __future__ import annotations

import io

import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from minihub.calculators.market_rates import MarketRates
from minihub.calculators.passive_income import PlannerResult
from minihub.components.formatting import format_brl, format_pct, format_pct_of_reference
from minihub.config import APP_NAME


def strategy_table(result: PlannerResult, rates: MarketRates) -> pd.DataFrame:
    """One row per figure, already formatted for display."""
    rows = [
        ("Renda mensal desejada", format_brl(result.monthly_income_target)),
        ("Capital necessário", format_brl(result.required_capital)),
        ("Taxa real bruta informada", format_pct(result.gross_real_rate)),
        ("Ganho real líquido (após IR)", format_pct(result.net_real_yield)),
        ("Inflação (IPCA 12 meses)", format_pct(rates.inflation_rate)),
        ("CDI", format_pct(rates.reference_rate)),
        ("Taxa mínima LCI/LCA", format_pct(result.min_rate_tax_exempt)),
        ("Taxa mínima CDB/Prefixado", format_pct(result.min_rate_taxable)),
        ("Mínimo para CDB pós-fixado", format_pct_of_reference(result.min_rate_percent_of_reference)),
    ]
    return pd.DataFrame(rows, columns=["Indicador", "Valor"])


def strategy_csv(result: PlannerResult, rates: MarketRates) -> bytes:
    return strategy_table(result, rates).to_csv(index=False).encode("utf-8")


def build_strategy_pdf(result: PlannerResult, rates: MarketRates) -> bytes:
    """Create a one-page PDF with the strategy summary."""
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=A4, leftMargin=36, rightMargin=36)
    styles = getSampleStyleSheet()
    story = [
        Paragraph(f"{APP_NAME} – Estratégia de Renda Passiva", styles["Title"]),
        Spacer(1, 12),
        Paragraph("Resumo", styles["Heading2"]),
    ]

    df = strategy_table(result, rates)
    rows = [list(df.columns)] + df.values.tolist()
    table = Table(rows, hAlign="LEFT")
    table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#DCFCE7")),
                ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ]
        )
    )
    story.extend([table, Spacer(1, 12)])

    story.append(Paragraph("Fase 1: Acumulação", styles["Heading2"]))
    story.append(Paragraph(
        f"Atingir {format_brl(result.required_capital)} reinvestindo 100% dos rendimentos. "
        f"O título informado rende {format_pct(result.net_real_yield)} acima da inflação (líquido).",
        styles["BodyText"],
    ))
    story.append(Paragraph("Fase 2: Renda", styles["Heading2"]))
    story.append(Paragraph(
        f"Investir {format_brl(result.required_capital)} no Tesouro IPCA+ com Juros Semestrais "
        f"à taxa real bruta de {format_pct(result.gross_real_rate)} para sacar "
        f"{format_brl(result.monthly_income_target)} por mês.",
        styles["BodyText"],
    ))

    doc.build(story)
    pdf_bytes = buffer.getvalue()
    buffer.close()
    return pdf_bytes


__all__ = ["strategy_table", "strategy_csv", "build_strategy_pdf"]
