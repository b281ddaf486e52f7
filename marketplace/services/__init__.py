# Services Module
from .database import Database, get_database, get_database_async, init_database, set_database

__all__ = ["Database", "get_database", "get_database_async", "init_database", "set_database"]
