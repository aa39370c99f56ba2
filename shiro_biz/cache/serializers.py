import json
import uuid
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, Union

from shiro_biz.logging.setup import get_logger

logger = get_logger(__name__)


class EnhancedJSONEncoder(json.JSONEncoder):
    """JSON Encoder hỗ trợ thêm các kiểu dữ liệu của Python."""

    def default(self, obj):
        if isinstance(obj, (datetime, date, time)):
            return obj.isoformat()
        elif isinstance(obj, Decimal):
            return float(obj)
        elif isinstance(obj, uuid.UUID):
            return str(obj)
        elif isinstance(obj, Enum):
            return obj.value
        elif isinstance(obj, set):
            return list(obj)
        return super().default(obj)


def serialize(data: Any) -> str:
    """
    Serialize dữ liệu để lưu vào cache.

    Args:
        data: Dữ liệu cần serialize

    Returns:
        Chuỗi JSON
    """
    try:
        return json.dumps(data, cls=EnhancedJSONEncoder)
    except (TypeError, ValueError) as e:
        logger.error(f"Lỗi khi serialize dữ liệu: {str(e)}")
        raise


def deserialize(data: Union[str, bytes, None]) -> Any:
    """
    Deserialize dữ liệu từ cache.

    Args:
        data: Dữ liệu đã serialize

    Returns:
        Dữ liệu gốc, hoặc chính data nếu không phải JSON
    """
    if data is None:
        return None

    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError:
            logger.error("Không thể decode dữ liệu binary")
            return data

    try:
        return json.loads(data)
    except json.JSONDecodeError:
        return data
