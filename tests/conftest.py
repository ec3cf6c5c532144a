import pytest

_ENV_KEYS = [
    "GITHUB_REF_NAME",
    "GITHUB_REF",
    "GITHUB_SHA",
    "GITHUB_RUN_NUMBER",
    "GITHUB_OUTPUT",
    "VERSIONER_VERSION_FILE",
    "VERSIONER_ENV_FILE",
    "VERSIONER_WRITE_VERSION",
    "VERSIONER_STRUCT_LOG",
    "NO_COLOR",
]


@pytest.fixture(autouse=True)
def _clean_ci_env(monkeypatch):
    # Tests may run inside a real CI job; keep its variables out
    for k in _ENV_KEYS:
        monkeypatch.delenv(k, raising=False)
