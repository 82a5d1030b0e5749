"""Workload producers generating the requests of a batch."""
import random
import threading
from abc import ABC, abstractmethod
from typing import List, Optional

from src.const import GEO_WORKLOAD, IMAGE_WORKLOAD
from src.shared.config import Config
from .constants import WorkloadConstants
from .models import RequestDescriptor


class WorkloadProducer(ABC):
    """Produces the request descriptor for each iteration of a batch."""

    name: str
    label: str

    def __init__(self, base_url: str, request_multiplier: int = 1, client_cooldown: float = 0.0):
        self.base_url = base_url.rstrip("/")
        self.request_multiplier = request_multiplier
        self.client_cooldown = client_cooldown

    def total_requests(self, pool_size: int, requests_per_client: int) -> int:
        """Number of logical requests a batch of this workload issues."""
        return pool_size * requests_per_client * self.request_multiplier

    @abstractmethod
    def next_request(self, index: int) -> RequestDescriptor:
        """Return the descriptor for iteration index."""


class RandomGeoTileProducer(WorkloadProducer):
    """Requests the map view at a random zoom level and position inside Luxembourg."""

    name = GEO_WORKLOAD
    label = WorkloadConstants.GEO_LABEL

    def __init__(self, base_url: str, client_cooldown: float = 0.0, seed: Optional[int] = None):
        super().__init__(base_url, request_multiplier=1, client_cooldown=client_cooldown)
        self._random = random.Random(seed)
        self._lock = threading.Lock()

    def random_spot(self):
        """Draw (zoom, lat, lng) inside the configured bounds."""
        with self._lock:
            zoom = self._random.randrange(WorkloadConstants.MIN_ZOOM, WorkloadConstants.MAX_ZOOM)
            lat = self._random.uniform(WorkloadConstants.MIN_LAT, WorkloadConstants.MAX_LAT)
            lng = self._random.uniform(WorkloadConstants.MIN_LNG, WorkloadConstants.MAX_LNG)
        return zoom, lat, lng

    def next_request(self, index: int) -> RequestDescriptor:
        zoom, lat, lng = self.random_spot()
        return RequestDescriptor(url=f"{self.base_url}/#{zoom}/{lat}/{lng}")


class FixedImageTileProducer(WorkloadProducer):
    """Requests the same tile image over and over."""

    name = IMAGE_WORKLOAD
    label = WorkloadConstants.IMAGE_LABEL

    def __init__(self, base_url: str, request_multiplier: int = 32, client_cooldown: float = 0.0):
        super().__init__(base_url, request_multiplier=request_multiplier, client_cooldown=client_cooldown)
        self._descriptor = RequestDescriptor(url=f"{self.base_url}/{WorkloadConstants.FIXED_TILE_PATH}")

    def next_request(self, index: int) -> RequestDescriptor:
        return self._descriptor


def build_workloads(config: Config) -> List[WorkloadProducer]:
    """Create the producers selected by the configuration, in configured order."""
    factories = {
        GEO_WORKLOAD: lambda: RandomGeoTileProducer(
            config.base_url,
            client_cooldown=config.geo_client_cooldown,
            seed=config.random_seed,
        ),
        IMAGE_WORKLOAD: lambda: FixedImageTileProducer(
            config.base_url,
            request_multiplier=config.image_request_multiplier,
            client_cooldown=config.image_client_cooldown,
        ),
    }
    return [factories[name]() for name in config.workloads]
