#!/usr/bin/env python3
"""
Async example: upload a directory tree concurrently, then list it back.

Requirements:
- SELECTEL_STORAGE_USER and SELECTEL_STORAGE_KEY environment variables set

Usage:
    python examples/storage_async.py [directory]
"""

import asyncio
import os
import sys

from dotenv import load_dotenv

from selectel_storage import AsyncStorageClient

load_dotenv()


async def main(root: str) -> None:
    client = await AsyncStorageClient.login(errors="return")
    if isinstance(client, int):
        print(f"login failed with HTTP {client}")
        return

    container = await client.get_container("examples-py")
    if isinstance(container, int):
        container = await client.create_container("examples-py")
        if isinstance(container, int):
            print(f"create_container failed with HTTP {container}")
            return

    uploads = []
    for dirpath, _, filenames in os.walk(root):
        for filename in filenames:
            local_path = os.path.join(dirpath, filename)
            remote_name = os.path.relpath(local_path, root).replace(os.sep, "/")
            uploads.append(container.put_file(local_path, remote_name))

    results = await asyncio.gather(*uploads)
    failed = [r for r in results if isinstance(r, int)]
    print(f"uploaded {len(results) - len(failed)} files, {len(failed)} failed")

    print(await container.list_files())


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "."))
