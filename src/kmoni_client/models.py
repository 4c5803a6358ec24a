from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .feedclock import parse_slash_time

# result.message がこれなら「該当IDの速報はまだ無い」（エラーではない）
NO_DATA_MESSAGE = "データがありません"


class ResultStatus(BaseModel):
    status: str
    message: str
    is_auth: Optional[bool] = None

    @property
    def is_no_data(self) -> bool:
        return self.message == NO_DATA_MESSAGE


class StatusProbe(BaseModel):
    """resultブロックだけを読む最小スキーマ（他のキーは無視）。"""
    result: ResultStatus


class LatestTimeResponse(BaseModel):
    # どちらもJSTのnaive時刻。UTCと比較する前に attach_feed_offset() を通すこと
    latest_time: datetime
    request_time: datetime
    result: ResultStatus

    @field_validator("latest_time", "request_time", mode="before")
    @classmethod
    def _slash_time(cls, v):
        if not isinstance(v, str):
            raise ValueError("expected 'YYYY/MM/DD HH:MM:SS' string")
        return parse_slash_time(v)


class EEWRawResponse(BaseModel):
    """hypo/eew/{id}.json の生の形。数値も文字列で来るのでここでは変換しない。"""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    result: ResultStatus
    report_time: str
    region_code: str
    request_time: str
    region_name: str
    longitude: str
    is_cancel: bool
    depth: str
    calcintensity: str
    is_final: bool
    is_training: bool
    latitude: str
    origin_time: str
    magnitude: str = Field(alias="magunitude")  # フィード側の綴り
    report_num: str
    request_hypo_type: str
    report_id: str
    alert_flag: Optional[str] = Field(default=None, alias="alertflg")


class EEWRecord(BaseModel):
    """正規化済みの緊急地震速報1件。時刻はすべてUTC+9付き。"""
    model_config = ConfigDict(frozen=True)

    report_time: datetime
    request_time: datetime
    origin_time: datetime
    region_code: str
    region_name: str
    longitude: float
    latitude: float
    magnitude: float
    depth: int  # km
    calcintensity: str  # "5弱" など。数値化しない
    is_cancel: bool
    is_final: bool
    is_training: bool
    report_num: int = Field(ge=0)
    request_hypo_type: str
    report_id: str
    alert_flag: Optional[str] = None

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")
