from .report_payloads import report_to_loggable

__all__ = ["report_to_loggable"]
