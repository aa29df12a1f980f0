"""Run errors raised by input strategies."""


class GtsValidatorError(ValueError):
    pass


class InputError(GtsValidatorError):
    """An input strategy could not produce content; the run is aborted."""

    def __init__(self, message: str, *, file_id: str | None = None) -> None:
        super().__init__(message)
        self.file_id = file_id


__all__ = ["GtsValidatorError", "InputError"]
