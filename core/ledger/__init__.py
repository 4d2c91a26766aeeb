"""
거래처 원장 (Party Ledger) 시스템

거래처별 회계연도 원장 명세서 계산.
기초 잔액 / 거래별 누적 잔액 / 기말 잔액을 생성하며,
PDF 렌더링은 adapters.pdf에서 담당.

사용 예시:
```python
from core.ledger import StatementBuilder

builder = StatementBuilder(repository)
statement = builder.build("abc-company")

for line in statement.lines:
    print(line.entry.reference, line.balance)

print(statement.closing_balance)
```
"""

from core.ledger.statement import (
    PartyNotFoundError,
    StatementBuilder,
    build_statement,
    compute_statement,
    sort_entries,
)
from core.ledger.types import (
    LedgerEntry,
    LedgerParty,
    LedgerStatement,
    StatementLine,
)

__all__ = [
    # 핵심 클래스
    "StatementBuilder",
    "build_statement",
    "compute_statement",
    "sort_entries",
    # 데이터 구조
    "LedgerEntry",
    "LedgerParty",
    "LedgerStatement",
    "StatementLine",
    # 예외
    "PartyNotFoundError",
]
