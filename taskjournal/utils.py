from datetime import datetime, timezone, tzinfo
from typing import Optional

from wcwidth import wcswidth

TIME_FORMAT = '%Y-%m-%d %H:%M'


def now_utc() -> datetime:
    """当前 UTC 时间，精确到秒（与存储精度一致）"""
    return datetime.now(timezone.utc).replace(microsecond=0)

def to_timestamp(dt: datetime) -> int:
    return int(dt.timestamp())

def from_timestamp(seconds: int) -> datetime:
    return datetime.fromtimestamp(seconds, tz=timezone.utc)

def format_local(dt: datetime, tz: Optional[tzinfo] = None) -> str:
    """tz 为 None 时按本机时区显示"""
    return dt.astimezone(tz).strftime(TIME_FORMAT)

def display_width(text: str) -> int:
    width = wcswidth(text)
    # 含控制字符时 wcswidth 返回 -1
    return len(text) if width < 0 else width

def smart_ljust(text, width):
    pad_len = width - display_width(text)
    return text + ' ' * max(0, pad_len)
