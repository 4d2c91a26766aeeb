"""
유틸리티 패키지

회계연도 계산, 날짜 포맷 등 공통 유틸리티
"""

from core.utils.dates import (
    IST,
    as_date,
    financial_year_start,
    format_display_date,
    now_ist,
    today_ist,
)

__all__ = [
    "IST",
    "as_date",
    "financial_year_start",
    "format_display_date",
    "now_ist",
    "today_ist",
]
