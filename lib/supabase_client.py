# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper around the Supabase client.
# It implements the singleton pattern to reuse a single client connection
# and provides generic row helpers shared by the product and favorite
# services.
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   product = SupabaseClient.fetch_row("products", product_id)
# =============================================================================

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from supabase import create_client, Client

from app.config import settings

# Set up logging for this module
logger = logging.getLogger(__name__)

# PostgREST error code for ".single()" matching zero rows
NO_ROWS_CODE = "PGRST116"
# Postgres "invalid_text_representation", e.g. a malformed uuid in a filter
INVALID_TEXT_CODE = "22P02"


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    Carries a code and an optional suggestion on how to fix the problem.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


def is_missing_row_error(error: Exception) -> bool:
    """
    Check whether a query error means "no such row".

    Covers ".single()" finding nothing and an id that cannot name a row
    (not a valid uuid), which Postgres rejects before looking.
    """
    code = getattr(error, "code", None)
    if code in (NO_ROWS_CODE, INVALID_TEXT_CODE):
        return True
    return NO_ROWS_CODE in str(error)


class SupabaseClient:
    """
    Typed wrapper for Supabase operations.

    Implements singleton pattern - one client instance is shared across
    the application. All methods are class methods for easy access without
    instantiation.

    Example:
        client = SupabaseClient.get_client()
        rows = client.table("products").select("*").execute().data
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).
        Authorization is enforced by the action handlers instead.

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
        return cls._instance

    @classmethod
    def _normalize_id(cls, value: str | UUID) -> str:
        """Convert UUID to string for queries."""
        return str(value) if isinstance(value, UUID) else value

    # -------------------------------------------------------------------------
    # Row Helpers
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_row(
        cls,
        table: str,
        row_id: str | UUID,
        columns: str = "*",
    ) -> dict[str, Any] | None:
        """
        Fetch a single row by primary key.

        Args:
            table: Table name
            row_id: Row UUID
            columns: PostgREST select expression

        Returns:
            Row dict, or None if not found (including malformed ids)

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()
        row_id_str = cls._normalize_id(row_id)

        try:
            response = (
                client.table(table)
                .select(columns)
                .eq("id", row_id_str)
                .single()
                .execute()
            )

            return response.data

        except Exception as e:
            if is_missing_row_error(e):
                return None
            raise SupabaseClientError(
                message=f"Failed to fetch row from {table}: {e}",
                code="FETCH_ROW_FAILED",
                details={"table": table, "id": row_id_str}
            )

    @classmethod
    def insert_row(cls, table: str, data: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a row and return it with generated id and timestamps.

        Raises:
            SupabaseClientError: If insert fails or returns nothing
        """
        client = cls.get_client()

        try:
            response = client.table(table).insert(data).execute()

            if response.data:
                return response.data[0]
            raise SupabaseClientError(
                message=f"Insert into {table} returned no data",
                code="INSERT_NO_DATA"
            )

        except SupabaseClientError:
            raise
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to insert into {table}: {e}",
                code="INSERT_FAILED",
                details={"table": table}
            )
