# core/config.py
import tomllib
from pathlib import Path

def _get_version():
    """Read the package version from pyproject.toml"""
    try:
        pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
        return data["project"]["version"]
    except (OSError, tomllib.TOMLDecodeError, KeyError):
        return "unknown"  # Fallback if pyproject.toml is missing

VERSION = _get_version()
DEFAULT_SIMILARITY_FORMULA = "cosine" # "cosine" or "reference" (dot / |a| * |b|)
REJECT_NON_FINITE = True # Reject NaN/Inf coefficients
COEFFICIENT_DTYPE = "float64"
REPR_MAX_COEFFICIENTS = 6 # Coefficients shown before eliding in repr()

class PathConfig:
    BASE_DIR = Path(__file__).parent.parent

    @classmethod
    def get_config_path(cls):
        return cls.BASE_DIR / "vector_config.json"
