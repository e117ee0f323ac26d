class TTEDerivationError(Exception):
    pass


class MalformedInputError(TTEDerivationError):
    pass


class FilterEvaluationError(TTEDerivationError):
    def __init__(self, message: str, *, source: str = "", subject_id: object = None):
        super().__init__(message)
        self.source = source
        self.subject_id = subject_id


class AmbiguousJoinError(TTEDerivationError):
    def __init__(self, message: str, *, duplicate_keys: list[tuple[object, ...]]):
        super().__init__(message)
        self.duplicate_keys = duplicate_keys
