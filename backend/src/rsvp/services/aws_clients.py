"""boto3 client construction."""

from __future__ import annotations

from typing import Any
from typing import Optional

import boto3


def create_client(service: str, region_name: Optional[str] = None) -> Any:
    """Create a new boto3 client for the given service.

    Callers own the returned client and pass it to the services that need
    it; nothing is cached at module level.
    """
    return boto3.client(  # type: ignore[call-overload]
        service,
        region_name=region_name,
    )


def create_ses_client(region_name: Optional[str] = None) -> Any:
    return create_client("ses", region_name=region_name)
