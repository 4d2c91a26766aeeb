"""
로컬 저장소 어댑터
"""

from adapters.storage.local_store import LocalStatementStore, resolve_output_dir

__all__ = [
    "LocalStatementStore",
    "resolve_output_dir",
]
