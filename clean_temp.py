#!/usr/bin/env python3
"""
Remove temporary files from a directory.

Only entries whose names match ``--pattern`` (shell‑style, default
``*``) are removed.  Empty directories are removed too; non‑empty
directories are reported and left in place.  Every failure is
reported.  The exit status is 1 if anything could not be removed or
the directory could not be listed.

Usage:
    python clean_temp.py --dir /tmp --pattern "upload-*.part"
    python clean_temp.py --fail-fast

The directory defaults to ``TEMP_DIR`` (``/tmp`` when unset).
"""

import argparse
import sys
from typing import List, Optional

from user_directory_api.app.core.config import settings
from user_directory_api.app.core.errors import CleanupError
from user_directory_api.app.core.logging_config import setup_logging
from user_directory_api.app.services.cleanup_service import TempFileCleaner


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Delete matching files from a temporary directory.")
    ap.add_argument("--dir", default=settings.temp_dir, help="Directory to clean (default: %(default)s)")
    ap.add_argument("--pattern", default="*", help="Shell-style name pattern (default: %(default)s)")
    ap.add_argument("--fail-fast", action="store_true", help="Stop at the first removal failure")
    args = ap.parse_args(argv)

    setup_logging(settings.log_level, settings.log_file)

    cleaner = TempFileCleaner(args.dir)
    try:
        result = cleaner.delete_temp_files(args.pattern, fail_fast=args.fail_fast)
    except CleanupError as exc:
        print(f"[!] {exc}", file=sys.stderr)
        return 1

    print(f"[+] Removed {len(result.removed)} entries from {args.dir}")
    for name, message in result.failures:
        print(f"[!] {name}: {message}", file=sys.stderr)
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
