from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Redactor:
    enabled: bool = True
    visible_chars: int = 2

    def redact_ip(self, ip: str) -> str:
        if not self.enabled:
            return ip
        parts = ip.split(".")
        if len(parts) == 4 and all(part.isdigit() for part in parts):
            return f"x.x.x.{parts[3]}"
        return ip

    def redact_access_code(self, code: str) -> str:
        if not self.enabled or not code:
            return code
        if len(code) <= self.visible_chars:
            return "*" * len(code)
        return "****" + code[-self.visible_chars :]
