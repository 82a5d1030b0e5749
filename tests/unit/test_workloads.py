"""Unit tests for the workload producers."""

import re
import threading

import pytest

from src.loadgen.workloads import RandomGeoTileProducer, FixedImageTileProducer, build_workloads
from tests.test_const import (
    TEST_BASE_URL, TEST_BASE_URL_WITH_SLASH, FIXED_TILE_URL, IMAGE_MULTIPLIER,
    MIN_ZOOM, MAX_ZOOM, MIN_LAT, MAX_LAT, MIN_LNG, MAX_LNG, RANDOM_SAMPLES, TEST_SEED
)

GEO_URL_PATTERN = re.compile(r"^http://tiles\.test/#(\d+)/([0-9.e-]+)/([0-9.e-]+)$")


def parse_geo_url(url):
    match = GEO_URL_PATTERN.match(url)
    assert match, f"Unexpected URL: {url}"
    return int(match.group(1)), float(match.group(2)), float(match.group(3))


def assert_in_bounds(zoom, lat, lng):
    assert MIN_ZOOM <= zoom < MAX_ZOOM
    assert MIN_LAT <= lat <= MAX_LAT
    assert MIN_LNG <= lng <= MAX_LNG


class TestRandomGeoTileProducer:
    """Test the randomized geo workload."""

    def test_spots_stay_in_bounds(self):
        """Test many draws never leave the zoom range or bounding box."""
        producer = RandomGeoTileProducer(TEST_BASE_URL)
        zooms = set()
        for index in range(RANDOM_SAMPLES):
            zoom, lat, lng = parse_geo_url(producer.next_request(index).url)
            assert_in_bounds(zoom, lat, lng)
            zooms.add(zoom)
        # With this many samples every zoom level shows up
        assert zooms == set(range(MIN_ZOOM, MAX_ZOOM))

    def test_descriptor_is_get(self):
        """Test that the geo workload issues GET requests."""
        assert RandomGeoTileProducer(TEST_BASE_URL).next_request(0).method == "GET"

    def test_seed_makes_sequence_reproducible(self):
        """Test that two producers with the same seed agree."""
        first = RandomGeoTileProducer(TEST_BASE_URL, seed=TEST_SEED)
        second = RandomGeoTileProducer(TEST_BASE_URL, seed=TEST_SEED)
        assert [first.next_request(i) for i in range(20)] == [second.next_request(i) for i in range(20)]

    def test_concurrent_calls_stay_in_bounds(self):
        """Test that concurrent callers get valid, distinct spots."""
        producer = RandomGeoTileProducer(TEST_BASE_URL, seed=TEST_SEED)
        urls = []
        lock = threading.Lock()

        def worker():
            for index in range(200):
                url = producer.next_request(index).url
                with lock:
                    urls.append(url)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(urls) == 1600
        for url in urls:
            assert_in_bounds(*parse_geo_url(url))
        assert len(set(urls)) > 1500

    def test_trailing_slash_is_stripped(self):
        """Test that the base URL does not produce a double slash."""
        url = RandomGeoTileProducer(TEST_BASE_URL_WITH_SLASH).next_request(0).url
        assert url.startswith(f"{TEST_BASE_URL}/#")

    def test_total_requests(self):
        """Test that the geo workload issues pool_size * requests_per_client requests."""
        assert RandomGeoTileProducer(TEST_BASE_URL).total_requests(3, 7) == 21


class TestFixedImageTileProducer:
    """Test the fixed image workload."""

    def test_always_same_url(self):
        """Test that every descriptor targets the canonical tile."""
        producer = FixedImageTileProducer(TEST_BASE_URL)
        urls = {producer.next_request(index).url for index in range(10)}
        assert urls == {FIXED_TILE_URL}

    def test_total_requests_are_scaled(self):
        """Test the per-request expansion factor."""
        producer = FixedImageTileProducer(TEST_BASE_URL, request_multiplier=IMAGE_MULTIPLIER)
        assert producer.total_requests(3, 7) == 3 * 7 * IMAGE_MULTIPLIER


class TestBuildWorkloads:
    """Test workload selection from configuration."""

    def test_default_builds_both(self, make_config):
        """Test that both workloads are built, geo first."""
        workloads = build_workloads(make_config(geo_client_cooldown=0.1, random_seed=TEST_SEED))

        assert [workload.name for workload in workloads] == ["geo", "image"]
        assert [workload.label for workload in workloads] == ["URL", "IMG"]
        assert workloads[0].client_cooldown == pytest.approx(0.1)
        assert workloads[1].request_multiplier == IMAGE_MULTIPLIER

    def test_single_workload(self, make_config):
        """Test selecting only the image workload."""
        workloads = build_workloads(make_config(workloads=["image"], image_request_multiplier=4))

        assert len(workloads) == 1
        assert isinstance(workloads[0], FixedImageTileProducer)
        assert workloads[0].request_multiplier == 4
