import sys
from pathlib import Path

# Make graph_mappings importable without installing the package
ROOT_DIR = Path(__file__).parent.absolute()

if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))
