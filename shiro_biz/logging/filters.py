import logging
from typing import List, Optional


class SensitiveDataFilter(logging.Filter):
    """
    Filter để che giấu thông tin nhạy cảm trong log messages.
    """

    def __init__(
        self,
        name: str = "",
        sensitive_fields: Optional[List[str]] = None,
        replacement: str = "***REDACTED***",
    ):
        super().__init__(name)
        self.sensitive_fields = sensitive_fields or [
            "password",
            "secret",
            "token",
            "captcha",
            "credential",
        ]
        self.replacement = replacement

    def _mask(self, msg: str) -> str:
        for field in self.sensitive_fields:
            for pattern in (f"{field}=", f"{field}:", f'"{field}":', f"'{field}':"):
                idx = msg.lower().find(pattern)
                if idx < 0:
                    continue

                start = idx + len(pattern)
                while start < len(msg) and msg[start].isspace():
                    start += 1

                end = start
                if start < len(msg):
                    if msg[start] in ('"', "'"):
                        quote = msg[start]
                        start += 1
                        end = msg.find(quote, start)
                        if end < 0:
                            end = len(msg)
                    else:
                        while end < len(msg) and msg[end] not in (" ", ",", ";", "\n", "\t"):
                            end += 1

                if end > start:
                    msg = msg[:start] + self.replacement + msg[end:]
        return msg

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Filter log record, masking sensitive data.

        Args:
            record: Log record to filter

        Returns:
            True to include the record in log output
        """
        if record.args:
            record.msg = record.getMessage()
            record.args = None
        record.msg = self._mask(str(record.msg))
        return True
