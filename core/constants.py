"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → 프로젝트 루트)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class Defaults:
    """기본값 상수"""

    COMPANY_NAME: str = "Your Company Name"
    VERSION: str = "1.0.0"

    WEB_HOST: str = "127.0.0.1"
    WEB_PORT: int = 8000


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    DATA_DIR: Path = PROJECT_ROOT / "data"
    STORAGE_DIR: Path = PROJECT_ROOT / "storage"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"
    WEB_LOGS_DIR: Path = LOGS_DIR / "web"

    # 설정 파일
    SECRETS_FILE: Path = CONFIG_DIR / "secrets.yaml"

    # 거래처 원장 데이터셋
    PARTIES_FILE: Path = DATA_DIR / "ledger_parties.yaml"

    # PDF 저장 경로 (LEDGER_OUTPUT_DIR 미설정 시)
    WINDOWS_OUTPUT_DIR: Path = Path("E:/") / "Tally Test" / "Tally PDF"
    FALLBACK_OUTPUT_DIR: Path = STORAGE_DIR / "Tally PDF"


class FinancialYear:
    """회계연도 기준 (4월 1일 시작)"""

    START_MONTH: int = 4
    START_DAY: int = 1


class StatementLayout:
    """원장 PDF 레이아웃 상수 (단위: pt)"""

    ROWS_PER_PAGE: int = 25

    # Date | Reference | Particulars | Debit | Credit
    COLUMN_WIDTHS: tuple[int, int, int, int, int] = (80, 150, 130, 80, 80)
    COLUMN_TITLES: tuple[str, str, str, str, str] = (
        "Date",
        "Reference",
        "Particulars",
        "Debit",
        "Credit",
    )

    MARGIN: int = 50
    LINE_HEIGHT: int = 14

    FONT_REGULAR: str = "Helvetica"
    FONT_BOLD: str = "Helvetica-Bold"
    FONT_SIZE_COMPANY: int = 18
    FONT_SIZE_TITLE: int = 14
    FONT_SIZE_BODY: int = 10

    DOCUMENT_TITLE: str = "Ledger Statement"
    EMPTY_AMOUNT: str = "-"


class EmailDefaults:
    """메일 기본 제목/본문"""

    SUBJECT: str = "Ledger Statement"
    BODY: str = (
        "Dear Sir/Madam,\n\n"
        "Please find attached the ledger statement of your account "
        "for the current financial year.\n\n"
        "Kindly verify and confirm the balance at the earliest.\n\n"
        "Regards,\n"
        "Accounts Department"
    )
    SUCCESS_MESSAGE: str = "Email sent successfully with Ledger attachment!"
