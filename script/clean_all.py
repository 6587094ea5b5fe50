#!/usr/bin/env python
"""
Store Cleanup Script
Delete every collection hash (bookings, daily prices, commission agents)
under the configured key prefix, then notify running app instances.

Other keys in the Kvrocks database are left untouched.
"""

import asyncio

from script.kvrocks_store import build_change_publisher
from src.platform.logging.loguru_io import Logger
from src.platform.state.kvrocks_client import kvrocks_client
from src.service.shared_kernel.domain.value_object.store_path import (
    BOOKINGS,
    COMMISSION_AGENTS,
    DAILY_PRICES,
)
from src.service.shared_kernel.driven_adapter.state.key_str_generator import (
    make_collection_key,
)


COLLECTIONS = [BOOKINGS, DAILY_PRICES, COMMISSION_AGENTS]


async def clean_store() -> None:
    client = kvrocks_client.get_client()
    publisher = build_change_publisher()

    for collection in COLLECTIONS:
        key = make_collection_key(collection=collection)
        removed = await client.hlen(key)
        await client.delete(key)
        Logger.base.info(f'🧹 Cleared {key} ({removed} records)')
        await publisher.publish_change(path=collection)


async def main() -> None:
    Logger.base.info('🚀 Starting store cleanup')
    await kvrocks_client.initialize()
    try:
        await clean_store()
    finally:
        await kvrocks_client.disconnect()
    Logger.base.info('🎉 Store cleanup completed')


if __name__ == '__main__':
    asyncio.run(main())
