import sys
from pathlib import Path

import pytest


# Garante que `src/` está no PYTHONPATH quando rodar pytest no repo.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def test_registry():
    """Registry padrão + as tags _test.* usadas nos casos de tipos primitivos."""
    from triton_tags import DEFAULT_REGISTRY, TagType

    return DEFAULT_REGISTRY.extend(
        {
            "triton._test.string": TagType.STRING,
            "triton._test.boolean": TagType.BOOLEAN,
            "triton._test.number": TagType.NUMBER,
        }
    )
