from __future__ import annotations

from typing import Any, Dict


class APIError(Exception):
    """Ошибка HTTP слоя: код и статус уходят клиенту как JSON."""

    def __init__(self, message: str, *, status_code: int = 500, code: str = "api_error"):
        super().__init__(message)
        self.status_code = status_code
        self.code = code

    def payload(self) -> Dict[str, Any]:
        return {"error": self.code, "message": str(self)}
