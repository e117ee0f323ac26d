from .services import DatasetWriterPort, EndpointRepositoryPort, LoggerPort, TableReaderPort

__all__ = [
    "DatasetWriterPort",
    "EndpointRepositoryPort",
    "LoggerPort",
    "TableReaderPort",
]
