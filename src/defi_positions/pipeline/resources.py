"""Resource loading from a fullnode or a saved JSON dump."""

from __future__ import annotations

import json
from pathlib import Path

from ..adapters import Resource
from ..clients import FullnodeClient
from .context import ScanContext


def load_resources_file(path: Path) -> list[Resource]:
    """Read resources saved from the fullnode ``/accounts/{address}/resources`` call.

    Raises:
        ValueError: If the file does not hold a JSON list of resources
    """
    with path.open("r", encoding="utf-8") as f:
        payload = json.load(f)
    if not isinstance(payload, list):
        raise ValueError(f"{path} must contain a JSON list of resources")
    return [Resource.from_dict(item) for item in payload]


def load_resources(ctx: ScanContext, resources_file: Path | None = None) -> None:
    """Load account resources into the context.

    Args:
        ctx: Pipeline context
        resources_file: Read resources from this file instead of the fullnode
    """
    s = ctx.state.settings
    log = ctx.state.logger

    if resources_file is not None:
        log.info("Loading resources from %s", resources_file)
        ctx.resources = load_resources_file(resources_file)
    else:
        url = s.fullnode_url_resolved
        log.info("Fetching resources of %s from %s", ctx.account_address, url)
        api_key = s.node_api_key.get_secret_value() if s.node_api_key else None
        with FullnodeClient(
            url,
            api_key=api_key,
            timeout=s.request_timeout,
            max_retries=s.max_retries,
            page_limit=s.page_limit,
        ) as client:
            ctx.resources = client.get_account_resources(ctx.account_address)

    log.info("Loaded %d resource(s)", len(ctx.resources))
