import logging

class TruncatingFilter(logging.Filter):
    """Shortens long records of loggers under ``name``; other records pass untouched."""

    def __init__(self, name: str = "", max_length: int = 250):
        super().__init__(name)
        self.max_length = max_length

    def _truncate(self, text: str) -> str:
        return text[:self.max_length] + "..."

    def filter(self, record: logging.LogRecord) -> bool:
        if not super().filter(record):
            return True

        if isinstance(record.args, tuple) and record.args:
            new_args = []
            for arg in record.args:
                s_arg = str(arg)
                if len(s_arg) > self.max_length:
                    new_args.append(self._truncate(s_arg))
                else:
                    new_args.append(arg)  # Keep original object
            record.args = tuple(new_args)
        elif isinstance(record.msg, str) and len(record.msg) > self.max_length:
            # f-strings: the override value is already part of the message
            record.msg = self._truncate(record.msg)
        return True
