"""weeknote のカスタム例外定義

parse / validate / format 自体は例外を送出しない。
ここで定義する例外は設定読み込みや JSON 入力など外側の層で使われる。
"""


class WeeknoteError(Exception):
    """weeknote 基底例外"""

    pass


class ConfigurationError(WeeknoteError):
    """設定エラー"""

    pass


class InvalidLogDataError(WeeknoteError, ValueError):
    """WeeklyLog として解釈できない JSON データ"""

    pass
