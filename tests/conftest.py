import pytest


class FakeConfig:
    """Stand-in for pulumi.Config backed by a dict."""

    def __init__(self, values):
        self._values = values

    def get(self, key):
        value = self._values.get(key)
        return None if value is None else str(value)

    def get_object(self, key):
        return self._values.get(key)


@pytest.fixture
def fake_config():
    return FakeConfig
