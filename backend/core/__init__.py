# Core module exports
from .config import *
from .database import create_client, create_database_indexes
