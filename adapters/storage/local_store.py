"""
원장 PDF 로컬 저장소

렌더링된 PDF를 설정된 디렉토리에 저장.
저장 실패는 치명적이지 않음 - 경고 로그 후 None 반환 (메일 발송은 계속).
IStatementStore Protocol 준수.
"""

import asyncio
import logging
import sys
from pathlib import Path

from core.constants import Paths

logger = logging.getLogger(__name__)


def resolve_output_dir(configured: Path | str | None = None, platform: str | None = None) -> Path:
    """PDF 저장 디렉토리 결정

    1. 설정값(LEDGER_OUTPUT_DIR)이 있으면 사용
    2. Windows: E:/Tally Test/Tally PDF
    3. 그 외: <프로젝트 루트>/storage/Tally PDF

    Args:
        configured: 설정된 디렉토리 (공백이면 미설정 취급)
        platform: sys.platform 오버라이드 (테스트용)
    """
    if configured is not None and str(configured).strip():
        return Path(configured)

    if (platform or sys.platform) == "win32":
        return Paths.WINDOWS_OUTPUT_DIR
    return Paths.FALLBACK_OUTPUT_DIR


class LocalStatementStore:
    """로컬 파일 시스템 저장소

    사용 예시:
    ```python
    store = LocalStatementStore(settings.output_dir)
    saved_path = await store.save("Ledger_ABC_Company_Ltd.pdf", pdf_bytes)
    ```
    """

    def __init__(self, output_dir: Path | str | None = None):
        """
        Args:
            output_dir: 저장 디렉토리 (None이면 플랫폼 기본 경로)
        """
        self.output_dir = resolve_output_dir(output_dir)

    def _write(self, filename: str, content: bytes) -> Path:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.output_dir / filename
        path.write_bytes(content)
        return path

    async def save(self, filename: str, content: bytes) -> Path | None:
        """PDF 저장

        Returns:
            저장 경로, 실패 시 None
        """
        try:
            path = await asyncio.to_thread(self._write, filename, content)
        except OSError as e:
            logger.warning(f"원장 PDF 로컬 저장 실패 (계속 진행): dir={self.output_dir}, error={e}")
            return None

        logger.info(f"원장 PDF 저장: {path}")
        return path
