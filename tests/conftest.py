import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
