from unitdeck.models.logs.log_record import LogRecord

__all__ = ["LogRecord"]
