"""Silent logger for tests and library callers that want no console output."""

from typing_extensions import override

from ...application.ports.services import LoggerPort


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        pass

    @override
    def success(self, message: str) -> None:
        pass

    @override
    def warning(self, message: str) -> None:
        pass

    @override
    def error(self, message: str) -> None:
        pass

    @override
    def debug(self, message: str) -> None:
        pass

    @override
    def verbose(self, message: str) -> None:
        pass

    @override
    def log_table_loaded(
        self, table_name: str, row_count: int, column_count: int | None = None
    ) -> None:
        pass

    @override
    def log_parameter_start(self, paramcd: str, param: str, source_count: int) -> None:
        pass

    @override
    def log_parameter_complete(
        self, paramcd: str, record_count: int, dropped_subjects: int
    ) -> None:
        pass

    @override
    def log_final_stats(self) -> None:
        pass
