import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so `import slide_elements` works
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from slide_elements.converter import MarkdownConverter  # noqa: E402
from slide_elements.factory import ElementFactory  # noqa: E402
from slide_elements.ids import SequentialIdGenerator  # noqa: E402


@pytest.fixture
def ids():
    return SequentialIdGenerator()


@pytest.fixture
def factory(ids):
    return ElementFactory(ids=ids)


@pytest.fixture
def converter(ids):
    return MarkdownConverter(ids=ids)
