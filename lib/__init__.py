# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Typed Supabase wrapper (singleton client, row helpers)
# - utils.py: Shared utilities (storage object names)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError, is_missing_row_error
from lib.utils import last_path_segment, timestamped_name

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    "is_missing_row_error",
    # Utils
    "last_path_segment",
    "timestamped_name",
]
