"""
FastAPI 애플리케이션

라우터 등록 및 앱 설정.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.constants import Defaults, EmailDefaults
from core.logging import setup_logging
from core.utils.dates import financial_year_start, format_display_date, today_ist

# 로깅 설정 (콘솔 + 파일)
setup_logging("web")

from adapters.interfaces import IPartyRepository
from web.dependencies import get_party_repository
from web.routes import health, ledger, send_email

logger = logging.getLogger(__name__)

# 경로 설정
WEB_DIR = Path(__file__).parent
TEMPLATES_DIR = WEB_DIR / "templates"
STATIC_DIR = WEB_DIR / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 생명주기 관리

    설정(SMTP 포함) / 거래처 데이터셋 로드 실패는 시작 단계에서 실패 처리.
    """
    from adapters.dataset.static_repository import StaticPartyRepository
    from adapters.mail.smtp_mailer import SmtpMailer
    from adapters.storage.local_store import LocalStatementStore
    from core.config.loader import get_settings
    from web.dependencies import set_adapters

    settings = get_settings()
    repository = StaticPartyRepository.from_yaml()
    store = LocalStatementStore(settings.output_dir)

    set_adapters(
        repository=repository,
        mailer=SmtpMailer(settings.smtp),
        store=store,
    )
    logger.info(
        f"Web: 초기화 완료 (SMTP={settings.smtp.host}:{settings.smtp.port}, "
        f"PDF 저장 경로={store.output_dir})"
    )

    yield

    set_adapters(None, None, None)


app = FastAPI(
    title="Ledger Mailer API",
    description="거래처 원장 명세서 PDF 생성 및 메일 발송 API",
    version=Defaults.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS 설정 (개발용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 정적 파일 및 템플릿 설정
if STATIC_DIR.exists():
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

templates = Jinja2Templates(directory=str(TEMPLATES_DIR)) if TEMPLATES_DIR.exists() else None


# =========================================================================
# 오류 응답 형식: {"error": "..."}
# =========================================================================

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """HTTPException → {"error": detail}"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """요청 검증 실패 → 400 + 첫 번째 오류 메시지"""
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid input") if errors else "Invalid input"
    return JSONResponse(status_code=400, content={"error": message})


# =========================================================================
# API 라우터 등록
# =========================================================================

app.include_router(health.router)
app.include_router(ledger.router)
app.include_router(send_email.router)


# =========================================================================
# 페이지 라우트 (HTML)
# =========================================================================

@app.get("/", include_in_schema=False)
async def home(
    request: Request,
    repository: IPartyRepository = Depends(get_party_repository),
):
    """원장 메일 작성 페이지"""
    if templates is None:
        return {"error": "Templates not configured"}

    today = today_ist()
    date_range = (
        f"{format_display_date(financial_year_start(today))} → {format_display_date(today)}"
    )
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "parties": repository.list_parties(),
            "date_range": date_range,
            "default_subject": EmailDefaults.SUBJECT,
            "default_body": EmailDefaults.BODY,
        },
    )
