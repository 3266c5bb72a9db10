from statement_client.results.export import DownloadableFile
from statement_client.results.models import DisplayModel
from statement_client.results.projector import project

__all__ = ["DisplayModel", "DownloadableFile", "project"]
