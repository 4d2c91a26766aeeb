"""
날짜 유틸리티

회계연도 계산 및 원장 표시용 날짜 포맷 헬퍼.
거래처 원장은 IST(UTC+5:30) 기준 영업일로 계산.
"""

from datetime import date, datetime, timedelta, timezone

from core.constants import FinancialYear

# IST 타임존 (UTC+5:30)
IST = timezone(timedelta(hours=5, minutes=30))


def now_ist() -> datetime:
    """현재 IST 시간 반환

    Returns:
        현재 IST 시간 (tzinfo=IST)
    """
    return datetime.now(IST)


def today_ist() -> date:
    """오늘 날짜 (IST 기준)"""
    return now_ist().date()


def as_date(value: date | datetime) -> date:
    """datetime이면 날짜 부분만 취함 (일 단위 비교용)

    Args:
        value: date 또는 datetime

    Returns:
        date 객체
    """
    if isinstance(value, datetime):
        return value.date()
    return value


def financial_year_start(reference: date | datetime | None = None) -> date:
    """기준일이 속한 회계연도의 시작일 반환

    1~3월이면 전년도 4월 1일, 그 외에는 당해 4월 1일.

    Args:
        reference: 기준일 (None이면 오늘, IST)

    Returns:
        회계연도 시작일

    Example:
        >>> financial_year_start(date(2025, 2, 10))
        datetime.date(2024, 4, 1)
        >>> financial_year_start(date(2025, 4, 1))
        datetime.date(2025, 4, 1)
    """
    ref = as_date(reference) if reference is not None else today_ist()
    year = ref.year if ref.month >= FinancialYear.START_MONTH else ref.year - 1
    return date(year, FinancialYear.START_MONTH, FinancialYear.START_DAY)


def format_display_date(value: date | datetime) -> str:
    """원장 표시용 날짜 포맷 (DD MMM YYYY)

    로케일과 무관하게 영문 월 약어 사용.

    Example:
        >>> format_display_date(date(2024, 4, 2))
        '02 Apr 2024'
    """
    d = as_date(value)
    months = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
    return f"{d.day:02d} {months[d.month - 1]} {d.year:04d}"
