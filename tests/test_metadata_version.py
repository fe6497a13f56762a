from pathlib import Path
import sys

import originlog

if sys.version_info >= (3, 11):
    import tomllib  # type: ignore
else:  # pragma: no cover - fallback for older interpreters
    import tomli as tomllib  # type: ignore


def test_fallback_version_matches_pyproject():
    pyproject = Path(__file__).parents[1] / "pyproject.toml"
    data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    assert data["project"]["version"] == originlog._FALLBACK_VERSION


def test_public_api_exported():
    for name in originlog.__all__:
        assert hasattr(originlog, name), name
