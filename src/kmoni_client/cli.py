"""cli.py — 1回だけ取得して結果をstdoutに出す（ポーリングはしない）"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from .client import KmoniClient
from .config import AppConfig
from .errors import KmoniError

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch the current kmoni EEW report once")
    p.add_argument("--config", default=None, help="config.yaml path (defaults built in)")
    return p.parse_args(argv)


def run_once(config_path: str | None = None) -> dict | None:
    cfg = AppConfig.load(config_path) if config_path else AppConfig()
    client = KmoniClient(cfg)
    record = client.fetch()
    return record.to_dict() if record is not None else None


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = _parse_args(argv)
    try:
        result = run_once(args.config)
    except KmoniError as e:
        logger.error("fetch failed: %s", e)
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
