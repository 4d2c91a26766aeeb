"""
설정 로더

secrets.yaml + 환경 변수에서 SMTP / 회사 / PDF 저장 경로 설정 로드.
환경 변수가 secrets.yaml보다 우선.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from core.constants import Defaults, Paths


@dataclass(frozen=True)
class SmtpConfig:
    """SMTP 발송 설정

    불변 데이터 구조로 설정 변경 방지
    """

    host: str
    port: int
    from_email: str
    user: str | None = None
    password: str | None = None
    secure: bool = False

    @property
    def has_credentials(self) -> bool:
        """로그인 정보(user + password) 유무"""
        return bool(self.user and self.password)


@dataclass(frozen=True)
class AppConfig:
    """애플리케이션 설정"""

    company_name: str
    smtp: SmtpConfig
    output_dir: Path | None = None


class ConfigLoadError(Exception):
    """설정 로드 실패 예외"""

    pass


def _read_yaml(path: Path) -> dict[str, Any]:
    """secrets.yaml 읽기 (파일이 없으면 빈 dict)"""
    if not path.exists():
        return {}

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"secrets.yaml 파싱 실패: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError("secrets.yaml 최상위는 mapping이어야 합니다")
    return data


def _pick(env: Mapping[str, str], env_key: str, file_value: Any) -> str | None:
    """환경 변수 우선, 없으면 파일 값 (공백 문자열은 미설정 취급)"""
    value = env.get(env_key)
    if value is None or not value.strip():
        value = file_value
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def load_config(
    path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> AppConfig:
    """설정 로드

    Args:
        path: secrets.yaml 경로 (None이면 기본 경로 사용)
        env: 환경 변수 mapping (None이면 os.environ)

    Returns:
        AppConfig 인스턴스

    Raises:
        ConfigLoadError: SMTP 필수 설정(host, port, from_email) 누락 또는 형식 오류
    """
    if path is None:
        path = Paths.SECRETS_FILE
    if env is None:
        env = os.environ

    data = _read_yaml(path)
    smtp_data = data.get("smtp") or {}
    if not isinstance(smtp_data, dict):
        raise ConfigLoadError("secrets.yaml의 'smtp' 섹션은 mapping이어야 합니다")

    host = _pick(env, "SMTP_HOST", smtp_data.get("host"))
    port_str = _pick(env, "SMTP_PORT", smtp_data.get("port"))
    from_email = _pick(env, "SMTP_FROM_EMAIL", smtp_data.get("from_email"))

    if not host or not port_str or not from_email:
        raise ConfigLoadError(
            "SMTP configuration is incomplete. "
            "Please set the required environment variables."
        )

    try:
        port = int(port_str)
    except ValueError as e:
        raise ConfigLoadError(f"유효하지 않은 SMTP 포트입니다: '{port_str}'") from e

    secure_raw = _pick(env, "SMTP_SECURE", smtp_data.get("secure"))
    secure = (secure_raw or "").lower() == "true"

    smtp = SmtpConfig(
        host=host,
        port=port,
        from_email=from_email,
        user=_pick(env, "SMTP_USER", smtp_data.get("user")),
        password=_pick(env, "SMTP_PASSWORD", smtp_data.get("password")),
        secure=secure,
    )

    company_name = _pick(env, "COMPANY_NAME", data.get("company_name")) or Defaults.COMPANY_NAME
    output_dir = _pick(env, "LEDGER_OUTPUT_DIR", data.get("ledger_output_dir"))

    return AppConfig(
        company_name=company_name,
        smtp=smtp,
        output_dir=Path(output_dir) if output_dir else None,
    )


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    secrets.yaml / 환경 변수를 로드하고 관련 설정을 제공
    """

    _instance: "Settings | None" = None
    _config: AppConfig | None = None

    def __new__(cls, secrets_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, secrets_path: Path | None = None) -> None:
        if self._config is None:
            self._config = load_config(secrets_path)

    @property
    def config(self) -> AppConfig:
        """전체 설정"""
        assert self._config is not None
        return self._config

    @property
    def company_name(self) -> str:
        """PDF 머리글 회사명"""
        return self.config.company_name

    @property
    def smtp(self) -> SmtpConfig:
        """SMTP 설정"""
        return self.config.smtp

    @property
    def output_dir(self) -> Path | None:
        """PDF 저장 디렉토리 (미설정 시 None)"""
        return self.config.output_dir

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._config = None


def get_settings(secrets_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        secrets_path: secrets.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(secrets_path)
