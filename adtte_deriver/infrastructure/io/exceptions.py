class DeriverInfrastructureError(Exception):
    pass


class DataSourceError(DeriverInfrastructureError):
    pass


class DataSourceNotFoundError(DataSourceError):
    pass


class DataParseError(DataSourceError):
    pass


class XportGenerationError(DeriverInfrastructureError):
    pass
