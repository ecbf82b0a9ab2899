#!/usr/bin/env python3
"""
Walk through the account and container operations with the blocking client.

Requirements:
- SELECTEL_STORAGE_USER and SELECTEL_STORAGE_KEY environment variables set
- Optional: SELECTEL_STORAGE_AUTH_URL for a non-default auth endpoint

Usage:
    python examples/storage.py
"""

import os
import tempfile
import time

from dotenv import load_dotenv

from selectel_storage import StorageClient, UnexpectedStatusError

load_dotenv()


def main() -> None:
    client = StorageClient.login(response_format="json")
    print("endpoint:", client.url)

    # 1) Account usage
    info = client.get_info()
    print("containers:", info.get("x-account-container-count"))
    print("bytes used:", info.get("x-account-bytes-used"))

    # 2) Create a container and upload into it
    container = client.create_container(
        "examples-py", {"X-Container-Meta-Type": "private"}
    )
    print("container:", container.name, container.get_info())

    container.put_file_contents("hello from python", "hello.txt")
    container.create_directory("assets")

    with tempfile.NamedTemporaryFile("wb", suffix=".bin", delete=False) as tmp:
        tmp.write(os.urandom(128 * 1024))
        local_path = tmp.name
    try:
        container.put_file(local_path, "assets/random.bin")
    finally:
        os.remove(local_path)

    # 3) Listings and object info
    print("files:", container.list_files(prefix="assets/"))
    print("hello.txt:", container.get_file_info("hello.txt"))

    outcome = container.get_file("hello.txt")
    print("get_file:", outcome.status_code, outcome.text)

    etag = outcome.headers.get("etag")
    if etag:
        again = container.get_file("hello.txt", {"If-None-Match": etag})
        print("conditional get:", again.status_code)

    # 4) Metadata, copy
    container.set_file_headers("hello.txt", {"X-Object-Meta-Author": "examples"})
    copied = client.copy("examples-py/hello.txt", "examples-py/hello-copy.txt")
    print("copy:", copied.status_code)

    # 5) Temp URL valid for ten minutes
    secret = os.getenv("SELECTEL_STORAGE_TEMP_URL_KEY", "examples-temp-url-key")
    client.set_account_meta_temp_url_key(secret)
    print(
        "temp url:",
        client.get_temp_url(
            secret, "/examples-py/hello.txt", int(time.time()) + 600, filename="hello.txt"
        ),
    )

    # 6) Cleanup
    for name in ("hello.txt", "hello-copy.txt", "assets/random.bin", "assets"):
        container.delete(name)
    try:
        client.delete("examples-py")
    except UnexpectedStatusError as e:
        print("cleanup failed:", e)


if __name__ == "__main__":
    main()
