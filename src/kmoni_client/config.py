from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

DEFAULT_LATEST_URL = "http://www.kmoni.bosai.go.jp/webservice/server/pros/latest.json"
DEFAULT_EEW_URL_TEMPLATE = "http://www.kmoni.bosai.go.jp/webservice/hypo/eew/{report_id}.json"


class AppConfig(BaseModel):
    latest_url: str = DEFAULT_LATEST_URL
    # {report_id} に YYYYMMDDHHMMSS が入る
    eew_url_template: str = DEFAULT_EEW_URL_TEMPLATE
    timeout_sec: float = Field(default=10.0, gt=0)
    user_agent: str = "kmoni-client/0.1"

    @classmethod
    def load(cls, path: str | Path) -> "AppConfig":
        p = Path(path)
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        return cls.model_validate(data)

    def headers(self) -> dict:
        return {"User-Agent": self.user_agent}
