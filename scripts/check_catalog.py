import asyncio
import sys
from collections import Counter
from pathlib import Path

from catalog_browser.config.loader import load_global_config
from catalog_browser.core.catalog import CatalogStore
from catalog_browser.core.exceptions import CatalogLoadError, RecordNormalizationError
from catalog_browser.core.record import normalize_record
from catalog_browser.services.catalog_loader import fetch_document

BASE_DIR = Path(__file__).parent.parent
CONFIG_DIR = BASE_DIR / "config"


def _print_counts(title: str, counts: Counter) -> None:
    print()
    print(f"{title:<15} | {'RECORDS'}")
    print("-" * 30)
    for key in sorted(counts):
        print(f"{key:<15} | {counts[key]}")


def check_catalog(config_dir: Path = CONFIG_DIR):
    config_dir = Path(config_dir)
    if not (config_dir / "global.json").exists():
        print(f"Error: global.json not found in {config_dir}")
        return

    cfg = load_global_config(config_dir)
    default_category = cfg.build_messages().default_category
    print(f"Source: {cfg.data_source}")

    try:
        document = asyncio.run(fetch_document(cfg.data_source))
    except CatalogLoadError as e:
        print(f"Error: {type(e).__name__}: {e}")
        return

    entries = document.get(cfg.records_field) if isinstance(document, dict) else None
    if not isinstance(entries, list):
        print(f"Error: document has no '{cfg.records_field}[]' array")
        return

    print(f"{'ENTRY':<8} | {'TAG':<20} | {'STATUS'}")
    print("-" * 60)

    seen = set()
    for idx, raw in enumerate(entries):
        try:
            record = normalize_record(raw, default_category=default_category)
        except RecordNormalizationError as e:
            print(f"{idx:<8} | {'-':<20} | ❌ {e}")
            continue
        if record.tag in seen:
            print(f"{idx:<8} | {record.tag:<20} | ❌ duplicate tag")
        elif record.status not in cfg.statuses:
            print(f"{idx:<8} | {record.tag:<20} | ⚠️ status '{record.status}' not in config")
        seen.add(record.tag)

    catalog = CatalogStore.from_raw(entries, default_category=default_category)

    _print_counts("STATUS", Counter(r.status for r in catalog))
    _print_counts("CATEGORY", Counter(r.category for r in catalog))
    print(f"{'total':<15} | {len(catalog)} of {len(entries)} entries")


if __name__ == "__main__":
    check_catalog(sys.argv[1] if len(sys.argv) > 1 else CONFIG_DIR)
