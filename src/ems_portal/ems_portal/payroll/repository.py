from __future__ import annotations

from typing import Protocol, Sequence

from .model import PayrollRecord


class PayrollRepository(Protocol):
    def list_month(self, *, token: str, month: str) -> Sequence[PayrollRecord]:
        raise NotImplementedError

    def generate(self, *, token: str, month: str) -> None:
        raise NotImplementedError

    def download_report(self, *, token: str, month: str) -> bytes:
        raise NotImplementedError
