"""
PDF 어댑터

원장 명세서 PDF 렌더링 (reportlab).
"""

from adapters.pdf.renderer import (
    RenderError,
    StatementHeader,
    StatementPdfRenderer,
    format_amount,
    format_balance,
    paginate,
)

__all__ = [
    "RenderError",
    "StatementHeader",
    "StatementPdfRenderer",
    "format_amount",
    "format_balance",
    "paginate",
]
