"""Translation of Supabase client failures into store errors."""

from collections.abc import Iterator
from contextlib import contextmanager

import httpx
from postgrest.exceptions import APIError

from portion_normalizer.domain.errors import ConflictError, StoreUnavailableError

UNIQUE_VIOLATION = "23505"


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Re-raise PostgREST and transport failures as domain errors."""
    try:
        yield
    except APIError as exc:
        if exc.code == UNIQUE_VIOLATION:
            raise ConflictError(f"{operation}: {exc.message}") from exc
        raise StoreUnavailableError(f"{operation}: {exc.message}") from exc
    except httpx.HTTPError as exc:
        raise StoreUnavailableError(f"{operation}: {exc}") from exc
