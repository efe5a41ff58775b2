"""StackerDB configuration endpoint handler."""

from __future__ import annotations

import json

from aiohttp import web

from signers_spec.subspecs.stackerdb import StackerDBConfig

from .common import require_registry


def config_to_json(config: StackerDBConfig) -> dict[str, object]:
    """Render the configuration with integers as numbers and hashes as 0x-hex."""
    return {
        "chunk_size": int(config.chunk_size),
        "write_freq": int(config.write_freq),
        "max_writes": int(config.max_writes),
        "max_neighbors": int(config.max_neighbors),
        "hint_replicas": [
            {
                "addr": [int(part) for part in replica.addr],
                "port": int(replica.port),
                "public_key_hash": "0x" + replica.public_key_hash.hex(),
            }
            for replica in config.hint_replicas
        ],
    }


async def handle_config(request: web.Request) -> web.Response:
    """
    Handle StackerDB configuration request.

    Response: JSON object with fields chunk_size, write_freq, max_writes,
    max_neighbors (integers) and hint_replicas (array).

    Status Codes:
        200 OK: Configuration returned.
        503 Service Unavailable: Registry not initialized.
    """
    registry = require_registry(request)
    config = registry.get_config().unwrap()

    return web.Response(
        body=json.dumps(config_to_json(config)),
        content_type="application/json",
    )
