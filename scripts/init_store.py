"""
Store initialization script.

Creates the key-value table and seeds default accounts, the starter program
and the exercise library on first run.

Usage:
    python scripts/init_store.py [STORE_URL]
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env file
from dotenv import load_dotenv

load_dotenv()

from studio.core.config import settings
from studio.core.exceptions import StoreWriteError
from studio.core.log import configure_logging
from studio.db.session import make_engine
from studio.db.store import COLLECTION_KEYS, StoreAdapter
from studio.services.seed_service import ensure_seeded

if __name__ == "__main__":
    configure_logging(settings)
    url = sys.argv[1] if len(sys.argv) > 1 else settings.STORE_URL

    print("=" * 50)
    print(f"{settings.PROJECT_NAME} Store Initialization")
    print("=" * 50)
    print()

    try:
        store = StoreAdapter(make_engine(url))
        seeded = ensure_seeded(store, settings)
    except StoreWriteError as e:
        print(f"ERROR: Store initialization failed: {e}")
        sys.exit(1)

    print(f"Store: {url}")
    print(f"Seeded: {', '.join(seeded) if seeded else 'nothing (already initialized)'}")
    for key in COLLECTION_KEYS:
        print(f"  {key}: {len(store.load(key))} records")
    sys.exit(0)
