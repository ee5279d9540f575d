"""
設定管理モジュール

関連:
  - weeknote.cli: ログ設定と既定の出力形式を使用
  - weeknote.server.run: サーバーのホスト・ポートを使用
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .exceptions import ConfigurationError

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "app_config.yaml"


@dataclass
class ServerConfig:
    """HTTP サーバー設定"""

    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class Config:
    """アプリケーション設定クラス"""

    server: ServerConfig = None  # type: ignore

    # ログ設定
    log_level: str = "INFO"
    log_file: str = "logs/weeknote.log"

    # CLI の既定出力形式 (text | json)
    output_format: str = "text"

    def __post_init__(self):
        """デフォルト値の初期化"""
        if self.server is None:
            self.server = ServerConfig()
        if self.output_format not in ("text", "json"):
            raise ConfigurationError(f"不正な output_format: {self.output_format}")

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "Config":
        """YAMLファイルから設定を読み込む

        Args:
            config_path: 設定ファイルパス（省略時は config/app_config.yaml）

        Returns:
            Config: 設定インスタンス

        Raises:
            ConfigurationError: ファイルが読めない、または内容がマッピングでない場合
        """
        path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

        try:
            with open(path, "r", encoding="utf-8") as f:
                yaml_data = yaml.safe_load(f)
        except OSError as exc:
            raise ConfigurationError(f"設定ファイルを読み込めません: {path}") from exc
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"設定ファイルの形式が不正です: {path}: {exc}") from exc

        if yaml_data is None:
            yaml_data = {}
        if not isinstance(yaml_data, dict):
            raise ConfigurationError(f"設定ファイルのトップレベルはマッピングである必要があります: {path}")

        log_data: Dict[str, Any] = yaml_data.get("log") or {}
        server_data: Dict[str, Any] = yaml_data.get("server") or {}
        cli_data: Dict[str, Any] = yaml_data.get("cli") or {}

        try:
            port = int(server_data.get("port", 8000))
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"不正な server.port: {server_data.get('port')!r}") from exc

        return cls(
            server=ServerConfig(
                host=server_data.get("host", "127.0.0.1"),
                port=port,
            ),
            log_level=log_data.get("level", "INFO"),
            log_file=log_data.get("file", "logs/weeknote.log"),
            output_format=cli_data.get("output_format", "text"),
        )

    @classmethod
    def from_env(cls) -> "Config":
        """環境変数から設定を読み込む"""
        port = os.getenv("WEEKNOTE_PORT", "8000")
        try:
            port_number = int(port)
        except ValueError as exc:
            raise ConfigurationError(f"不正な WEEKNOTE_PORT: {port!r}") from exc

        return cls(
            server=ServerConfig(
                host=os.getenv("WEEKNOTE_HOST", "127.0.0.1"),
                port=port_number,
            ),
            log_level=os.getenv("WEEKNOTE_LOG_LEVEL", "INFO"),
            log_file=os.getenv("WEEKNOTE_LOG_FILE", "logs/weeknote.log"),
            output_format=os.getenv("WEEKNOTE_OUTPUT_FORMAT", "text"),
        )
