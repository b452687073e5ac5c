from .engine import build_engine, create_schema, dispose_engine, get_engine, init_engine
from .gateway import StoreGateway, StoreScope

__all__ = [
    "build_engine",
    "create_schema",
    "dispose_engine",
    "get_engine",
    "init_engine",
    "StoreGateway",
    "StoreScope",
]
