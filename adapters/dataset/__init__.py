"""
거래처 데이터셋 어댑터

YAML 기반 읽기 전용 거래처 카탈로그.
IPartyRepository Protocol 준수.
"""

from adapters.dataset.static_repository import DatasetLoadError, StaticPartyRepository

__all__ = [
    "DatasetLoadError",
    "StaticPartyRepository",
]
