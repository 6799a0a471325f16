from __future__ import annotations

from decimal import Decimal
from typing import Iterable, List

from ..auth.service import SessionStore
from ..common.datetime_utils import parse_month
from ..core.constants import REPORT_CONTENT_TYPE
from ..core.exceptions import AuthenticationError, AuthorizationError
from .model import PayrollRecord, PayrollReport, PayrollTotals
from .repository import PayrollRepository


def summarize(records: Iterable[PayrollRecord]) -> PayrollTotals:
    """Footer totals. Row values come from the server and are only summed."""
    gross = deductions = net = Decimal("0")
    for r in records:
        gross += r.gross_pay
        deductions += r.deductions
        net += r.net_pay
    return PayrollTotals(gross_pay=gross, deductions=deductions, net_pay=net)


class PayrollService:
    """Use case: monthly payroll for administrators."""

    def __init__(self, payroll: PayrollRepository):
        self._payroll = payroll

    @staticmethod
    def _admin_token(session: SessionStore) -> str:
        if not session.credential or not session.is_authenticated:
            raise AuthenticationError("Please sign in to continue")
        if not session.is_admin:
            raise AuthorizationError("Only administrators can access payroll")
        return session.credential

    def list_month(self, *, session: SessionStore, month: str) -> List[PayrollRecord]:
        month = parse_month(month)
        token = self._admin_token(session)
        try:
            return list(self._payroll.list_month(token=token, month=month))
        except AuthenticationError:
            session.expire()
            raise

    def generate(self, *, session: SessionStore, month: str) -> None:
        month = parse_month(month)
        token = self._admin_token(session)
        try:
            self._payroll.generate(token=token, month=month)
        except AuthenticationError:
            session.expire()
            raise

    def download_report(self, *, session: SessionStore, month: str) -> PayrollReport:
        month = parse_month(month)
        token = self._admin_token(session)
        try:
            content = self._payroll.download_report(token=token, month=month)
        except AuthenticationError:
            session.expire()
            raise
        return PayrollReport(month=month, content=content, content_type=REPORT_CONTENT_TYPE)
