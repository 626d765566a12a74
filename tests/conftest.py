import io
import logging

import pytest


@pytest.fixture
def capture_logs():
    """Fixture to capture log output during tests."""
    log_stream = io.StringIO()
    handler = logging.StreamHandler(log_stream)
    logger = logging.getLogger("weightdag")
    logger.addHandler(handler)
    previous_level = logger.level
    logger.setLevel(logging.DEBUG)

    yield log_stream  # Yield the stream to the test function

    # Cleanup after the test
    logger.removeHandler(handler)
    logger.setLevel(previous_level)
    log_stream.close()


@pytest.fixture
def graph_yaml(tmp_path):
    """A YAML description of the reference graph."""
    path = tmp_path / "graph.yaml"
    path.write_text(
        """weight_type: integer
vertices:
  - {name: a, weight: 7}
  - {name: b, weight: 9}
  - {name: c, weight: 11}
  - {name: d, weight: 9}
  - {name: e, weight: 4}
edges:
  - {origin: a, destination: b, weight: 13}
  - {origin: a, destination: c, weight: 2}
  - {origin: a, destination: d, weight: 17}
  - {origin: c, destination: b, weight: 19}
  - {origin: d, destination: b, weight: 11}
  - {origin: c, destination: e, weight: 7}
"""
    )
    return path
