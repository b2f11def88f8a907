"""Services layer - Application orchestration.

Available services:
- StopIngestionService: Best-effort ingestion of a stops table
- StopGraphService: Build, export and geographic filtering of the graph
"""

from .ingestion_service import StopIngestionService
from .stop_graph_service import AreaRun, StopGraphService

__all__ = ["StopIngestionService", "StopGraphService", "AreaRun"]
