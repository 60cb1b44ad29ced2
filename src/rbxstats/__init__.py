"""rbxstats - client for the RbxStats API"""

__version__ = '0.1.0'

from .client import (
    ENDPOINTS,
    RbxStatsClient,
    RbxStatsError,
    RequestFailedError,
    TransportInitError,
    resolve_endpoint,
)
from .parser import parse_json, parse_strict

__all__ = [
    'ENDPOINTS',
    'RbxStatsClient',
    'RbxStatsError',
    'RequestFailedError',
    'TransportInitError',
    'resolve_endpoint',
    'parse_json',
    'parse_strict',
]
