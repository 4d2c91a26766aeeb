"""
의존성 주입

FastAPI의 Depends를 사용한 의존성 관리.
거래처 데이터셋 / 메일 발송기 / 저장소는 앱 시작(lifespan) 시 1회 설정.
"""

from fastapi import Depends

from adapters.interfaces import IMailer, IPartyRepository, IStatementStore
from core.config.loader import Settings, get_settings
from web.services.ledger_mail_service import LedgerMailService


def get_app_settings() -> Settings:
    """애플리케이션 설정 반환"""
    return get_settings()


# =========================================================================
# 공유 어댑터 (lifespan에서 설정)
# =========================================================================

_repository: IPartyRepository | None = None
_mailer: IMailer | None = None
_store: IStatementStore | None = None


def set_adapters(
    repository: IPartyRepository | None,
    mailer: IMailer | None,
    store: IStatementStore | None,
) -> None:
    """공유 어댑터 설정

    앱 시작 시 호출. 종료 시 None으로 해제.
    """
    global _repository, _mailer, _store
    _repository = repository
    _mailer = mailer
    _store = store


def _require(adapter, name: str):
    if adapter is None:
        raise RuntimeError(f"{name}가 초기화되지 않았습니다 (앱 lifespan 미실행)")
    return adapter


def get_party_repository() -> IPartyRepository:
    """거래처 데이터셋 반환"""
    return _require(_repository, "거래처 데이터셋")


def get_mailer() -> IMailer:
    """메일 발송기 반환"""
    return _require(_mailer, "메일 발송기")


def get_statement_store() -> IStatementStore:
    """PDF 저장소 반환"""
    return _require(_store, "PDF 저장소")


def get_ledger_mail_service(
    repository: IPartyRepository = Depends(get_party_repository),
    mailer: IMailer = Depends(get_mailer),
    store: IStatementStore = Depends(get_statement_store),
    settings: Settings = Depends(get_app_settings),
) -> LedgerMailService:
    """원장 메일 서비스 (요청마다 생성)"""
    return LedgerMailService(
        repository=repository,
        mailer=mailer,
        store=store,
        company_name=settings.company_name,
        from_email=settings.smtp.from_email,
    )
