from .endpoint_config_repository import (
    EndpointConfigLoadError,
    EndpointConfigRepository,
    load_endpoint_config,
)

__all__ = [
    "EndpointConfigLoadError",
    "EndpointConfigRepository",
    "load_endpoint_config",
]
