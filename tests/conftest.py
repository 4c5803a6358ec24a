from __future__ import annotations

import copy

import pytest

# 実際のレスポンス（2023/05/21 福島県沖）
EEW_SAMPLE = {
    "result": {"status": "success", "message": "", "is_auth": True},
    "report_time": "2023/05/21 16:03:57",
    "region_code": "",
    "request_time": "20230521160357",
    "region_name": "福島県沖",
    "longitude": "141.5",
    "is_cancel": False,
    "depth": "20km",
    "calcintensity": "2",
    "is_final": False,
    "is_training": False,
    "latitude": "37.2",
    "origin_time": "20230521160321",
    "security": {
        "realm": "/kyoshin_monitor/static/jsondata/eew_est/",
        "hash": "b61e4d95a8c42e004665825c098a6de4",
    },
    "magunitude": "3.5",
    "report_num": "2",
    "request_hypo_type": "eew",
    "report_id": "20230521160327",
    "alertflg": "予報",
}

NO_DATA_SAMPLE = {
    "result": {"status": "success", "message": "データがありません", "is_auth": True},
    "report_time": "",
    "region_code": "",
    "request_time": "20230521160500",
    "region_name": "",
    "longitude": "",
    "is_cancel": "",
    "depth": "",
    "calcintensity": "",
    "is_final": "",
    "is_training": "",
    "latitude": "",
    "origin_time": "",
    "security": {"realm": "", "hash": ""},
    "magunitude": "",
    "report_num": "",
    "request_hypo_type": "",
    "report_id": "",
}

LATEST_SAMPLE = {
    "latest_time": "2023/05/21 16:00:00",
    "request_time": "2023/05/21 16:00:01",
    "result": {"status": "success", "message": ""},
}


@pytest.fixture
def eew_payload() -> dict:
    return copy.deepcopy(EEW_SAMPLE)


@pytest.fixture
def no_data_payload() -> dict:
    return copy.deepcopy(NO_DATA_SAMPLE)


@pytest.fixture
def latest_payload() -> dict:
    return copy.deepcopy(LATEST_SAMPLE)
