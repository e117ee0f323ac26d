"""Wiring of the ADTTE build use case.

Adapters are created once per container; each call to
``create_adtte_use_case`` returns a new use case sharing them.
"""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING

from rich.console import Console

from ..application.adtte_use_case import ADTTEBuildDependencies, ADTTEBuildUseCase
from .io.csv_reader import CSVReader, CSVReadOptions
from .io.xpt_writer import XPTWriter
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger
from .repositories.endpoint_config_repository import EndpointConfigRepository

if TYPE_CHECKING:
    from ..application.ports.services import LoggerPort


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
        csv_options: CSVReadOptions | None = None,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self.csv_options = csv_options

    @cached_property
    def _logger(self) -> LoggerPort:
        if self.use_null_logger:
            return NullLogger()
        return ConsoleLogger(console=self.console, verbosity=self.verbose)

    @cached_property
    def _csv_reader(self) -> CSVReader:
        return CSVReader(self.csv_options)

    @cached_property
    def _xpt_writer(self) -> XPTWriter:
        return XPTWriter()

    @cached_property
    def _endpoint_repository(self) -> EndpointConfigRepository:
        return EndpointConfigRepository()

    def create_logger(self) -> LoggerPort:
        return self._logger

    def create_csv_reader(self) -> CSVReader:
        return self._csv_reader

    def create_xpt_writer(self) -> XPTWriter:
        return self._xpt_writer

    def create_endpoint_repository(self) -> EndpointConfigRepository:
        return self._endpoint_repository

    def create_adtte_use_case(self) -> ADTTEBuildUseCase:
        return ADTTEBuildUseCase(
            ADTTEBuildDependencies(
                logger=self._logger,
                table_reader=self._csv_reader,
                endpoint_repository=self._endpoint_repository,
                dataset_writer=self._xpt_writer,
            )
        )
