from src.data_sources.ingestion import ClientRecordIngester, IngestionError
from src.data_sources.sources import DataSource, FileDataSource

__all__ = [
    "ClientRecordIngester",
    "DataSource",
    "FileDataSource",
    "IngestionError",
]
