"""フィードの時計モデル。

kmoniのタイムスタンプはオフセット表記を持たない（暗黙のJST = UTC+9）。
パーサはnaiveな「フィードローカル時刻」を返し、UTCとの演算の前に
attach_feed_offset() を必ず一度だけ通す。
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

FEED_TZ = timezone(timedelta(hours=9), name="JST")

SLASH_FORMAT = "%Y/%m/%d %H:%M:%S"    # 2023/05/21 16:03:57
COMPACT_FORMAT = "%Y%m%d%H%M%S"       # 20230521160357


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_slash_time(text: str) -> datetime:
    """"YYYY/MM/DD HH:MM:SS" → naive datetime（フィードローカル）。"""
    return datetime.strptime(text, SLASH_FORMAT)


def parse_compact_time(text: str) -> datetime:
    """"YYYYMMDDHHMMSS" → naive datetime（フィードローカル）。"""
    # strptimeは桁数の足りない入力も通すので長さを先に固定する
    if len(text) != 14 or not text.isdigit():
        raise ValueError(f"time data {text!r} does not match format {COMPACT_FORMAT!r}")
    return datetime.strptime(text, COMPACT_FORMAT)


def attach_feed_offset(local: datetime) -> datetime:
    """naiveなフィードローカル時刻にUTC+9を付与する唯一の変換点。"""
    if local.tzinfo is not None:
        raise ValueError("feed timestamp already carries an offset")
    return local.replace(tzinfo=FEED_TZ)


def predicted_feed_time(now: datetime, delay: timedelta) -> datetime:
    """now（aware）から計測済み遅延を引き、フィードのUTC+9表現で返す。"""
    if now.tzinfo is None or now.tzinfo.utcoffset(now) is None:
        raise ValueError("now must be timezone-aware")
    return (now - delay).astimezone(FEED_TZ)


def format_report_id(feed_time: datetime) -> str:
    if feed_time.tzinfo is None:
        raise ValueError("feed_time must be timezone-aware")
    return feed_time.astimezone(FEED_TZ).strftime(COMPACT_FORMAT)


def report_url(template: str, report_id: str) -> str:
    return template.format(report_id=report_id)
