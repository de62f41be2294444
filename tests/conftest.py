import sys
from pathlib import Path

# Ensure the project root and src directory are on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
for path in (SRC_PATH, PROJECT_ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))


import pytest

from tests.fixtures.pcap_builder import PcapBuilder


@pytest.fixture
def dual_stack_pcap(tmp_path: Path) -> Path:
    """Return path to a small capture with IPv4, IPv6 and non-IP frames."""
    return PcapBuilder.dual_stack_pcap(tmp_path)
