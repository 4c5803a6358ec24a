"""kmoni クライアント本体。

設計契約:
- 遅延（delay）はコンストラクタで1回だけ計測し、以後は変更しない
- fetch は「URL予測 → GET → デコード」を1回行うだけ。リトライしない
- 通信エラーもデコードエラーもそのまま呼び出し元へ伝播する
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Optional

import requests

from .config import AppConfig
from .decode import decode_event, decode_latest
from .errors import TransportError
from .feedclock import (
    attach_feed_offset,
    format_report_id,
    predicted_feed_time,
    report_url as build_report_url,
    utc_now,
)
from .models import EEWRecord

logger = logging.getLogger(__name__)


def _get(url: str, cfg: AppConfig, session: Optional[requests.Session] = None) -> bytes:
    getter = session.get if session is not None else requests.get
    try:
        resp = getter(url, timeout=cfg.timeout_sec, headers=cfg.headers())
        resp.raise_for_status()
    except requests.RequestException as e:
        logger.warning("kmoni GET %s failed: %s", url, e)
        raise TransportError(f"GET {url} failed: {e}") from e
    return resp.content


def estimate_delay(
    cfg: AppConfig,
    now: datetime | None = None,
    session: Optional[requests.Session] = None,
) -> timedelta:
    """latest.json を1回取得し、now(UTC) - latest_time(JST) を返す。"""
    latest = decode_latest(_get(cfg.latest_url, cfg, session))
    if now is None:
        now = utc_now()
    delay = now - attach_feed_offset(latest.latest_time)
    logger.info(
        "kmoni delay: %.0fs (latest_time=%s, status=%s)",
        delay.total_seconds(), latest.latest_time, latest.result.status,
    )
    return delay


class KmoniClient:
    def __init__(
        self,
        config: AppConfig | None = None,
        session: Optional[requests.Session] = None,
        now: datetime | None = None,
    ) -> None:
        self._config = config or AppConfig()
        self._session = session
        self._delay = estimate_delay(self._config, now=now, session=session)

    def __repr__(self) -> str:
        return f"KmoniClient(delay={self._delay!r})"

    @property
    def delay(self) -> timedelta:
        return self._delay

    @property
    def config(self) -> AppConfig:
        return self._config

    def report_id(self, now: datetime | None = None) -> str:
        if now is None:
            now = utc_now()
        return format_report_id(predicted_feed_time(now, self._delay))

    def report_url(self, now: datetime | None = None) -> str:
        return build_report_url(self._config.eew_url_template, self.report_id(now))

    def fetch(self, now: datetime | None = None) -> Optional[EEWRecord]:
        """予測したIDの速報を取得。まだ無ければ None。"""
        url = self.report_url(now)
        record = decode_event(_get(url, self._config, self._session))
        if record is not None:
            logger.info(
                "kmoni %s: %s M%.1f depth=%dkm intensity=%s (report #%d%s)",
                record.report_id, record.region_name, record.magnitude,
                record.depth, record.calcintensity, record.report_num,
                ", final" if record.is_final else "",
            )
        return record
