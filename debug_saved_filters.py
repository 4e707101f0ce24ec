#!/usr/bin/env python3
"""Inspect the saved filters of a module against the live backend."""

import argparse
import logging
import sys

from erp_saved_filters.access import Principal, filter_actions
from erp_saved_filters.api import SavedFiltersAPIClient
from erp_saved_filters.config import configure_logging, load_settings
from erp_saved_filters.filtering import describe_filter, load_user_fields, validate_filter_config
from erp_saved_filters.store import SavedFiltersStore

logger = logging.getLogger(__name__)


def inspect_module(module: str, principal_id: str) -> int:
    """List a module's filters with description, validation and ACL summary."""
    settings = load_settings()
    configure_logging(settings.log_level)

    client = SavedFiltersAPIClient.from_settings(settings)
    store = SavedFiltersStore(client, module)

    if not store.list():
        error = store.error
        print(f"❌ Could not load filters ({error.kind.value if error else 'unknown'}): {error}")
        return 1

    fields = load_user_fields()
    principal = Principal(id=principal_id)

    print(f"📊 {len(store.filters)} saved filters for module '{module}'")
    default_filter = store.get_default_filter(module)
    if default_filter:
        print(f"⭐ Default: {default_filter.name} ({default_filter.id})")

    for saved_filter in store.filters:
        is_valid, errors = validate_filter_config(saved_filter.filters, fields)
        actions = filter_actions(saved_filter, principal, module)

        print(f"\n{'✅' if is_valid else '⚠️'} {saved_filter.name} [{saved_filter.id}]")
        print(f"   {describe_filter(saved_filter.filters, fields)}")
        print(f"   shared={saved_filter.is_shared} default={saved_filter.is_default}")
        print(f"   edit={actions.can_edit} share={actions.can_share} delete={actions.can_delete}")
        for error in errors:
            print(f"   - {error}")

    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--module", default="users")
    parser.add_argument("--principal", default="", help="User id used for the ACL summary")
    args = parser.parse_args()

    sys.exit(inspect_module(args.module, args.principal))
