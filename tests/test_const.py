"""Constants used across all test files."""

# Target server
TEST_BASE_URL = "http://tiles.test"
TEST_BASE_URL_WITH_SLASH = "http://tiles.test/"
FIXED_TILE_URL = "http://tiles.test/14/8471/5564.png"

# Batch sizing
TEST_POOL_SIZE = 2
TEST_REQUESTS_PER_CLIENT = 5
IMAGE_MULTIPLIER = 32

# HTTP status codes
HTTP_SUCCESS = 200
HTTP_NO_CONTENT = 204
HTTP_NOT_FOUND = 404
HTTP_UNAVAILABLE = 503

# Response bodies
TILE_BODY = b"\x89PNG tile"
UNAVAILABLE_BODY = "upstream renderer unavailable"

# Geo bounds
MIN_ZOOM = 14
MAX_ZOOM = 22
MIN_LAT = 49.4426671413
MAX_LAT = 50.1280516628
MIN_LNG = 5.67405195478
MAX_LNG = 6.24275109216

# Sampling
RANDOM_SAMPLES = 2000
TEST_SEED = 1234

# Server behaviors
REDIRECTED_TILE_URL = "http://tiles.test/cache/14/8471/5564.png"
HTTP_FOUND = 302
SESSION_COOKIE = "sess=abc"
CORRUPT_GZIP_BODY = b"not gzip"
