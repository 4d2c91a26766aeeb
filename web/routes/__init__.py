"""
API 라우트 패키지

각 기능별 라우터 모듈:
- health: 헬스 체크
- ledger: 거래처 목록 / 원장 명세서 (JSON, PDF)
- send_email: 원장 PDF 메일 발송
"""
