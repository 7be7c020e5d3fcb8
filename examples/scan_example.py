"""Example script showing how to build and query the catalog programmatically."""
from __future__ import annotations

from pathlib import Path
import sys
import tempfile

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from catalog import CatalogService  # type: ignore  # noqa: E402
from utils.config import CatalogConfig  # type: ignore  # noqa: E402
from utils.logging import configure_logging  # type: ignore  # noqa: E402


def main() -> None:
    configure_logging("INFO")
    with tempfile.TemporaryDirectory() as tmp:
        config = CatalogConfig(source_dir=Path(tmp) / "data", cache_dir=Path(tmp) / "cache")
        service = CatalogService(config)
        store = service.load_or_bootstrap()
        print(f"{len(store)} entries from {', '.join(service.list_sources())}")
        for text in service.candidates(["example"]):
            print(text)


if __name__ == "__main__":
    main()
