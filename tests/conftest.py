import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import humanname
sys.path.insert(0, str(Path(__file__).parent.parent))

from humanname import HumanNameParser, NameParserConfig


@pytest.fixture(scope="session")
def parser():
    """Shared parser with the default configuration."""
    return HumanNameParser()


@pytest.fixture(scope="session")
def multi_parser():
    """Shared parser that splits "John and Jane Smith" into linked names."""
    return HumanNameParser(NameParserConfig(parse_multiple_names=True))
