"""構造化 (JSON) ログの設定

標準出力はコマンドの結果に使うため、ログは標準エラー出力に書き出す。
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

NOISY_LOGGERS = ("httpx", "httpcore", "openai", "google_genai")


class JSONFormatter(logging.Formatter):
    """ログレコードを1行のJSONに整形する"""

    def __init__(self, service_name: str) -> None:
        """初期化"""
        super().__init__()
        self._service = service_name

    def format(self, record: logging.LogRecord) -> str:
        """1件のログをJSON文字列にする"""
        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "service": self._service,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)

        extra = getattr(record, "_extra", None)
        if extra:
            entry["extra"] = extra

        return json.dumps(entry, default=str, ensure_ascii=False)


def setup_logging(service_name: str) -> logging.Logger:
    """ルートロガーを設定し、サービス用のロガーを返す

    コマンドの起動時に一度だけ呼ぶ。レベルは LOG_LEVEL で指定する。
    """
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JSONFormatter(service_name))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    return logging.getLogger(service_name)
