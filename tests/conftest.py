import pytest

BF_VARS = ("BF_MEMORY_SIZE", "BF_POINTER_POLICY", "BF_INPUT_POLICY", "BF_STEP_LIMIT")


@pytest.fixture(autouse=True)
def clean_bf_env(monkeypatch):
    """Keep BF_* settings from the developer's shell out of the tests.

    Setting each variable first makes monkeypatch remove whatever a test's
    .env file loads into os.environ.
    """
    for name in BF_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
