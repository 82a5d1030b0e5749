"""Constants for the tile load generator."""

# Default configuration values
DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_POOL_SIZE = 10
DEFAULT_REQUESTS_PER_CLIENT = 10
DEFAULT_MAX_FAILURES_PER_CLIENT = 0
DEFAULT_REQUEST_TIMEOUT = 5.0  # seconds
DEFAULT_MAX_KEEPALIVE_CONNECTIONS = 100
DEFAULT_RETRY_ATTEMPTS = 5
DEFAULT_RETRY_DELAY = 0.05  # seconds
DEFAULT_GEO_CLIENT_COOLDOWN = 0.1  # seconds
DEFAULT_IMAGE_CLIENT_COOLDOWN = 0.0
DEFAULT_IMAGE_REQUEST_MULTIPLIER = 32

# Logging configuration
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Library log levels
LIBRARY_LOG_LEVELS = {
    "httpx": "WARNING",
    "httpcore": "WARNING",
}

# Settings sources
ENV_PREFIX = "TILE_LOADGEN_"
CONFIG_FILE_NAME = "loadgen.json"

# Workload names
GEO_WORKLOAD = "geo"
IMAGE_WORKLOAD = "image"
DEFAULT_WORKLOADS = [GEO_WORKLOAD, IMAGE_WORKLOAD]

# HTTP
HTTP_GET = "GET"
MAX_DIAGNOSTIC_BODY_LENGTH = 512
