from __future__ import annotations

import logging
from typing import List

from lascheck.domain.schemas import Diagnostic, Severity, UnsupportedCode

logger = logging.getLogger(__name__)


class DiagnosticSink:
    """
    Ordered collector for check results.

    Fails and warnings share one list and keep the order in which the
    checks emitted them. Unsupported codes go to a separate list and never
    count as a failure on their own.
    """

    def __init__(self) -> None:
        self.diagnostics: List[Diagnostic] = []
        self.unsupported: List[UnsupportedCode] = []

    def add_fail(self, category: str, message: str) -> None:
        self.diagnostics.append(Diagnostic(category=category, severity=Severity.FAIL, message=message))

    def add_warning(self, category: str, message: str) -> None:
        self.diagnostics.append(Diagnostic(category=category, severity=Severity.WARNING, message=message))

    def add_unsupported(self, key: str, value: int, note: str) -> None:
        logger.debug("%s: %s", key, note)
        self.unsupported.append(UnsupportedCode(key=key, value=value, note=note))

    @property
    def fails(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == Severity.FAIL]

    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == Severity.WARNING]

