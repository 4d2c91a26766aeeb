"""
원장 명세서 PDF 렌더러

LedgerStatement를 고정 5열 표(Date | Reference | Particulars | Debit | Credit)
PDF로 렌더링. 25행마다 새 페이지를 시작하고 표 머리글을 다시 출력.

구현: reportlab canvas (표준 Helvetica 폰트, 임베딩 불필요).
Helvetica는 Latin-1 범위만 지원하므로 ₹, 데바나가리 문자는 대체 글리프로 출력됨.
문서 전체를 BytesIO에 그린 뒤 save()로 완성된 바이트만 반환.
렌더링 중 오류가 나면 RenderError로 감싸서 전파 (부분 출력 없음).
"""

import io
import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import TypeVar

from reportlab.lib.pagesizes import LETTER
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from core.constants import Defaults, StatementLayout
from core.ledger.types import LedgerStatement, StatementLine
from core.utils.dates import format_display_date

logger = logging.getLogger(__name__)

T = TypeVar("T")

CENTS = Decimal("0.01")
ELLIPSIS = "..."


class RenderError(Exception):
    """PDF 렌더링 실패 예외 (원인 예외는 __cause__)"""

    pass


@dataclass(frozen=True)
class StatementHeader:
    """PDF 머리글 정보"""

    company_name: str = Defaults.COMPANY_NAME


# -------------------------------------------------------------------------
# 포맷 헬퍼
# -------------------------------------------------------------------------

def format_balance(value: Decimal) -> str:
    """금액을 소수점 2자리 문자열로 (반올림: ROUND_HALF_UP)

    Example:
        >>> format_balance(Decimal("21250"))
        '21250.00'
    """
    quantized = value.quantize(CENTS, rounding=ROUND_HALF_UP)
    if quantized == 0:
        quantized = abs(quantized)  # "-0.00" 방지
    return f"{quantized:.2f}"


def format_amount(value: Decimal) -> str:
    """차변/대변 셀 포맷 (0이면 '-')

    Example:
        >>> format_amount(Decimal("0"))
        '-'
        >>> format_amount(Decimal("12.5"))
        '12.50'
    """
    if value == 0:
        return StatementLayout.EMPTY_AMOUNT
    return format_balance(value)


def format_date_range(statement: LedgerStatement) -> str:
    """'DD MMM YYYY - DD MMM YYYY'"""
    return (
        f"{format_display_date(statement.from_date)} - "
        f"{format_display_date(statement.to_date)}"
    )


def paginate(rows: list[T] | tuple[T, ...], rows_per_page: int = StatementLayout.ROWS_PER_PAGE) -> list[list[T]]:
    """행 목록을 페이지 단위로 분할

    26번째, 51번째... 행 앞에서 페이지가 나뉨.
    행이 없어도 머리글을 그릴 첫 페이지 1개는 반환.

    Example:
        >>> [len(page) for page in paginate(list(range(26)))]
        [25, 1]
    """
    if rows_per_page < 1:
        raise ValueError("rows_per_page는 1 이상이어야 합니다")
    if not rows:
        return [[]]
    return [list(rows[i:i + rows_per_page]) for i in range(0, len(rows), rows_per_page)]


def fit_text(text: str, font_name: str, font_size: float, width: float) -> str:
    """열 너비를 넘는 텍스트는 말줄임표로 자름 (행당 1줄 유지)"""
    if stringWidth(text, font_name, font_size) <= width:
        return text
    for end in range(len(text) - 1, 0, -1):
        candidate = text[:end].rstrip() + ELLIPSIS
        if stringWidth(candidate, font_name, font_size) <= width:
            return candidate
    return ELLIPSIS


def wrap_text(text: str, font_name: str, font_size: float, width: float) -> list[str]:
    """머리글 정보 줄을 너비에 맞춰 여러 줄로 분할 (단어 단위)

    단어 하나가 너비보다 길면 그 단어만 한 줄로 남음.
    """
    return simpleSplit(text, font_name, font_size, width) or [text]


# -------------------------------------------------------------------------
# 렌더러
# -------------------------------------------------------------------------

class StatementPdfRenderer:
    """원장 명세서 PDF 렌더러

    호출마다 새 canvas/버퍼를 사용하므로 동시 호출 간 공유 상태 없음.

    사용 예시:
    ```python
    renderer = StatementPdfRenderer()
    pdf_bytes = renderer.render(statement, StatementHeader("ACME Pvt Ltd"))
    ```
    """

    COLUMN_PADDING = 4

    def __init__(
        self,
        rows_per_page: int = StatementLayout.ROWS_PER_PAGE,
        page_size: tuple[float, float] = LETTER,
        compress: bool = True,
    ):
        """
        Args:
            rows_per_page: 페이지당 데이터 행 수
            page_size: 용지 크기 (pt)
            compress: 페이지 스트림 압축 여부
        """
        self.rows_per_page = rows_per_page
        self.page_width, self.page_height = page_size
        self.compress = compress

        widths = StatementLayout.COLUMN_WIDTHS
        self.column_widths = widths
        self.column_offsets = tuple(
            StatementLayout.MARGIN + sum(widths[:i]) for i in range(len(widths))
        )

    @property
    def top(self) -> float:
        return self.page_height - StatementLayout.MARGIN

    @property
    def usable_width(self) -> float:
        return self.page_width - 2 * StatementLayout.MARGIN

    def render(self, statement: LedgerStatement, header: StatementHeader | None = None) -> bytes:
        """명세서를 PDF 바이트로 렌더링

        Args:
            statement: 원장 명세서
            header: 머리글 정보 (None이면 기본 회사명)

        Returns:
            완성된 PDF 바이트

        Raises:
            RenderError: 레이아웃/출력 중 오류 (원인 예외 포함)
        """
        if header is None:
            header = StatementHeader()

        buffer = io.BytesIO()
        pages = paginate(statement.lines, self.rows_per_page)

        try:
            pdf = canvas.Canvas(
                buffer,
                pagesize=(self.page_width, self.page_height),
                pageCompression=1 if self.compress else 0,
                invariant=1,
            )
            pdf.setTitle(f"{StatementLayout.DOCUMENT_TITLE} - {statement.party.name}")
            pdf.setAuthor(header.company_name)

            y = self._draw_title_block(pdf, statement, header)

            for page_index, page_lines in enumerate(pages):
                if page_index > 0:
                    pdf.showPage()
                    y = self.top
                y = self._draw_table_header(pdf, y)
                for line in page_lines:
                    y = self._draw_row(pdf, y, line)

            self._draw_closing_balance(pdf, y, statement)
            pdf.save()
        except Exception as e:
            logger.error(f"원장 PDF 렌더링 실패: party={statement.party.party_id}, error={e}")
            raise RenderError(f"Failed to render ledger PDF: {e}") from e

        content = buffer.getvalue()
        logger.info(
            f"원장 PDF 렌더링 완료: party={statement.party.party_id}, "
            f"{len(pages)}페이지, {len(content)} bytes"
        )
        return content

    # -- 블록 그리기 --------------------------------------------------------

    def _draw_title_block(
        self,
        pdf: canvas.Canvas,
        statement: LedgerStatement,
        header: StatementHeader,
    ) -> float:
        """회사명 / 제목 / 거래처 정보 / 기간"""
        center_x = self.page_width / 2
        line_height = StatementLayout.LINE_HEIGHT
        y = self.top - StatementLayout.FONT_SIZE_COMPANY

        pdf.setFont(StatementLayout.FONT_REGULAR, StatementLayout.FONT_SIZE_COMPANY)
        pdf.drawCentredString(center_x, y, header.company_name)
        y -= StatementLayout.FONT_SIZE_COMPANY + line_height

        pdf.setFont(StatementLayout.FONT_REGULAR, StatementLayout.FONT_SIZE_TITLE)
        pdf.drawCentredString(center_x, y, StatementLayout.DOCUMENT_TITLE)
        y -= StatementLayout.FONT_SIZE_TITLE + line_height

        party = statement.party
        info_lines = [f"Party: {party.name}"]
        if party.gstin:
            info_lines.append(f"GSTIN: {party.gstin}")
        if party.address:
            info_lines.append(f"Address: {party.address}")
        info_lines.append(f"Date Range: {format_date_range(statement)}")

        font_name = StatementLayout.FONT_REGULAR
        font_size = StatementLayout.FONT_SIZE_BODY
        pdf.setFont(font_name, font_size)
        for text in info_lines:
            # 긴 주소 등은 여백 안에서 줄바꿈
            for piece in wrap_text(text, font_name, font_size, self.usable_width):
                pdf.drawString(StatementLayout.MARGIN, y, piece)
                y -= line_height

        return y - line_height

    def _draw_cells(self, pdf: canvas.Canvas, y: float, cells: tuple[str, ...], font_name: str) -> None:
        size = StatementLayout.FONT_SIZE_BODY
        pdf.setFont(font_name, size)

        for index, (text, x, width) in enumerate(zip(cells, self.column_offsets, self.column_widths)):
            text = fit_text(text, font_name, size, width - self.COLUMN_PADDING)
            if index >= 3:
                # Debit, Credit 우측 정렬
                pdf.drawRightString(x + width, y, text)
            else:
                pdf.drawString(x, y, text)

    def _draw_table_header(self, pdf: canvas.Canvas, y: float) -> float:
        self._draw_cells(pdf, y, StatementLayout.COLUMN_TITLES, StatementLayout.FONT_BOLD)
        return y - StatementLayout.LINE_HEIGHT * 1.5

    def _draw_row(self, pdf: canvas.Canvas, y: float, line: StatementLine) -> float:
        entry = line.entry
        cells = (
            format_display_date(entry.date),
            entry.reference,
            entry.particulars,
            format_amount(entry.debit),
            format_amount(entry.credit),
        )
        self._draw_cells(pdf, y, cells, StatementLayout.FONT_REGULAR)
        return y - StatementLayout.LINE_HEIGHT

    def _draw_closing_balance(self, pdf: canvas.Canvas, y: float, statement: LedgerStatement) -> None:
        y -= StatementLayout.LINE_HEIGHT
        pdf.setFont(StatementLayout.FONT_BOLD, StatementLayout.FONT_SIZE_BODY)
        pdf.drawString(
            StatementLayout.MARGIN,
            y,
            f"Closing Balance: {format_balance(statement.closing_balance)}",
        )
