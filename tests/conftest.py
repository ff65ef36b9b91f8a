import pytest

from tplroot.config.model import RootOptions


@pytest.fixture
def strict_options() -> RootOptions:
    """Rule options with top-level comments disallowed."""
    return RootOptions(disallow_comments=True)
