"""Tests for package metadata."""
import re
from pathlib import Path

SETUP_PY = Path(__file__).parent.parent / "setup.py"


def test_python_requires_matches_classifier():
    """Test the minimum Python version agrees with the classifiers."""
    text = SETUP_PY.read_text(encoding="utf-8")
    required = re.search(r'python_requires=">=(\d+\.\d+)"', text).group(1)
    classified = re.findall(r'"Programming Language :: Python :: (\d+\.\d+)"', text)
    assert classified
    assert min(classified, key=lambda v: tuple(map(int, v.split(".")))) == required
