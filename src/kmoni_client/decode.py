"""kmoni レスポンスのデコード。

EEWレスポンスは「データあり」でも「データなし」でも同じ形をしていて、
データなしの場合は各フィールドが空文字になるだけ。なので2段階で読む:

1. result ブロックだけを読む（StatusProbe）
2. message が NO_DATA_MESSAGE なら None を返して終了
3. そうでなければ全フィールドを厳密に読み、1つでも正規化に失敗したら例外
   （部分的に埋まったレコードは返さない）
"""
from __future__ import annotations

import logging
import math
import re
from datetime import datetime
from typing import Callable, Optional, Union

from pydantic import ValidationError

from .errors import MalformedTimestamp, NotNumeric, StructuralDecodeError, UnitSuffixMissing
from .feedclock import attach_feed_offset, parse_compact_time, parse_slash_time
from .models import EEWRawResponse, EEWRecord, LatestTimeResponse, StatusProbe

logger = logging.getLogger(__name__)

Payload = Union[bytes, str]

_UNSIGNED_RE = re.compile(r"[0-9]+")
_DEPTH_UNIT = "km"


def decode_latest(raw: Payload) -> LatestTimeResponse:
    """latest.json → LatestTimeResponse。時刻や result が読めなければ StructuralDecodeError。"""
    try:
        return LatestTimeResponse.model_validate_json(raw)
    except ValidationError as e:
        raise StructuralDecodeError(f"latest.json: {e}") from e


def decode_event(raw: Payload) -> Optional[EEWRecord]:
    """hypo/eew/{id}.json → EEWRecord、データなしなら None。"""
    try:
        probe = StatusProbe.model_validate_json(raw)
    except ValidationError as e:
        raise StructuralDecodeError(f"status probe: {e}") from e

    if probe.result.is_no_data:
        logger.debug("EEW: no data (%s)", probe.result.status)
        return None

    try:
        body = EEWRawResponse.model_validate_json(raw)
    except ValidationError as e:
        raise StructuralDecodeError(f"eew payload: {e}") from e

    return normalize_event(body)


def normalize_event(body: EEWRawResponse) -> EEWRecord:
    return EEWRecord(
        report_time=_parse_time("report_time", body.report_time, parse_slash_time),
        request_time=_parse_time("request_time", body.request_time, parse_compact_time),
        origin_time=_parse_time("origin_time", body.origin_time, parse_compact_time),
        region_code=body.region_code,
        region_name=body.region_name,
        longitude=_parse_float("longitude", body.longitude),
        latitude=_parse_float("latitude", body.latitude),
        magnitude=_parse_float("magnitude", body.magnitude),
        depth=_parse_depth_km("depth", body.depth),
        calcintensity=body.calcintensity,
        is_cancel=body.is_cancel,
        is_final=body.is_final,
        is_training=body.is_training,
        report_num=_parse_unsigned("report_num", body.report_num),
        request_hypo_type=body.request_hypo_type,
        report_id=body.report_id,
        alert_flag=body.alert_flag,
    )


def _parse_time(field: str, text: str, parser: Callable[[str], datetime]) -> datetime:
    try:
        local = parser(text)
    except ValueError as e:
        raise MalformedTimestamp(field, text, str(e)) from e
    return attach_feed_offset(local)


def _parse_float(field: str, text: str) -> float:
    try:
        value = float(text)
    except ValueError as e:
        raise NotNumeric(field, text) from e
    if not math.isfinite(value):
        raise NotNumeric(field, text)
    return value


def _parse_unsigned(field: str, text: str) -> int:
    if not _UNSIGNED_RE.fullmatch(text):
        raise NotNumeric(field, text)
    return int(text)


def _parse_depth_km(field: str, text: str) -> int:
    """"20km" → 20。単位なしは切り捨てずに UnitSuffixMissing。"""
    if not text.endswith(_DEPTH_UNIT):
        raise UnitSuffixMissing(field, text)
    return _parse_unsigned(field, text[: -len(_DEPTH_UNIT)])
