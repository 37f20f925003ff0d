#!/usr/bin/env python3
"""
Migration script to add derived member uid fields to band documents.

- Bands that already have an editorUids list are skipped.
- For every other band, memberUids, adminUids and editorUids are computed
  from its members list and written back, leaving other fields untouched.
- A failure on one band is reported and counted, the rest still run.

Usage:
    MONGO_USERNAME=... MONGO_PASSWORD=... python -m scripts.migrate_editor_uids
"""

import sys
import traceback
from dataclasses import dataclass

from db import BandStore, band_store
from models import Band
from utils import band_label, derive_uid_fields, is_migrated

SEPARATOR = "=" * 50


@dataclass
class MigrationResult:
    """Counters accumulated over one run"""

    total: int = 0
    updated: int = 0
    skipped_existing: int = 0
    errors: int = 0

    @property
    def skipped(self) -> int:
        return self.total - self.updated

    @property
    def exit_code(self) -> int:
        return 1 if self.errors > 0 else 0


def migrate_band(store: BandStore, document: dict) -> dict:
    """
    Writes the derived uid fields of one band document

    Args:
        store (BandStore): Store holding the document.
        document (dict): The raw band document.

    Returns:
        dict: The fields that were written.

    Raises:
        ValidationError: The members list is malformed.
        Exception: The update was not applied.
    """

    band = Band.model_validate(document)
    fields = derive_uid_fields(band)
    store.update_fields(document["_id"], fields)
    return fields


def print_summary(result: MigrationResult) -> None:
    print("\n" + SEPARATOR)
    print("MIGRATION SUMMARY")
    print(SEPARATOR)
    print(f"Total bands processed: {result.total}")
    print(f"Bands updated: {result.updated}")
    print(f"Bands skipped (already had editorUids): {result.skipped}")
    print(f"Errors: {result.errors}")
    print(SEPARATOR)

    if result.updated > 0:
        print("\nMigration completed successfully!")
        print("Note: You may need to restart your app to see the changes.")
    else:
        print("\nAll bands already have editorUids field!")


def run(store: BandStore) -> MigrationResult:
    """
    Backfills memberUids, adminUids and editorUids on every band

    Errors while listing the bands propagate; errors on a single band
    are counted and the loop moves on.

    Args:
        store (BandStore): Store holding the bands collection.

    Returns:
        MigrationResult: Counters for the run.
    """

    print("Starting editorUids migration...\n")

    documents = store.list_bands()
    result = MigrationResult(total=len(documents))
    print(f"Found {result.total} band documents\n")

    for document in documents:
        label = band_label(document)
        if is_migrated(document):
            result.skipped_existing += 1
            print(f'Skipping "{label}" - editorUids already exists')
            continue

        try:
            fields = migrate_band(store, document)
        except Exception as e:
            result.errors += 1
            print(
                f'Error updating "{document.get("_id")}": {e}', file=sys.stderr
            )
            continue

        result.updated += 1
        print(
            f'Updated "{label}": {len(fields["editorUids"])} editors, '
            f'{len(fields["adminUids"])} admins, '
            f'{len(fields["memberUids"])} total members'
        )

    print_summary(result)
    return result


def main() -> int:
    """
    Runs the migration against the configured database

    Returns:
        int: 0 when every band was handled, 1 on a fatal error
             or when any band failed to update.
    """

    try:
        with band_store() as store:
            result = run(store)
    except Exception as e:
        print(f"\nMigration failed: {e}", file=sys.stderr)
        traceback.print_exc()
        return 1

    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
