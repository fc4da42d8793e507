"""BaseService — shared foundation for jsonrec services."""

from __future__ import annotations

from typing import TYPE_CHECKING

from jsonrec.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from jsonrec.config.settings import JsonrecSettings


class BaseService:
    """Base for service-layer classes.

    Every service receives the resolved settings at construction time and
    reads its policy switches (such as schema gating) from them.
    """

    def __init__(self, settings: JsonrecSettings) -> None:
        self._settings = settings

    @staticmethod
    def _fail(op: str, code: str, message: str, **detail: object) -> ServiceResult:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=dict(detail)),
        )
