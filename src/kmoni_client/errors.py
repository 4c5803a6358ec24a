"""kmoni_client 例外階層。

- TransportError: リクエスト自体が完了しなかった（接続・タイムアウト・HTTPステータス）
- DecodeError: レスポンスを型付きモデルに変換できなかった
    - StructuralDecodeError: JSONの形がそもそも合わない
    - FieldNormalizationError: 個別フィールドの正規化に失敗（理由別サブクラス）

「データがありません」はエラーではなく None で返す（decode.py 参照）。
"""
from __future__ import annotations

from typing import Any


class KmoniError(RuntimeError):
    pass


class TransportError(KmoniError):
    pass


class DecodeError(KmoniError):
    pass


class StructuralDecodeError(DecodeError):
    pass


class FieldNormalizationError(DecodeError):
    reason = "invalid"

    def __init__(self, field: str, value: Any, detail: str = "") -> None:
        self.field = field
        self.value = value
        msg = f"{field}: {self.reason} ({value!r})"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class NotNumeric(FieldNormalizationError):
    reason = "not numeric"


class UnitSuffixMissing(FieldNormalizationError):
    reason = "unit suffix missing"


class MalformedTimestamp(FieldNormalizationError):
    reason = "malformed timestamp"
