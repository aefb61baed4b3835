from pathlib import Path
import os

PACKAGE_ROOT = Path(os.path.dirname(os.path.realpath(__file__))).parent.parent
LOG_FILE = PACKAGE_ROOT / "log.txt"
PERSISTENT_CACHE_DIR = PACKAGE_ROOT / ".persistent_cache"
