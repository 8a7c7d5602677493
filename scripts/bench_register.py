#!/usr/bin/env python3
"""Benchmark document registration: throughput (docs/s) and latency.

Usage:
  From host (API on localhost, trusted identity header):
    export API_URL=http://localhost:8000 BENCH_IDENTITY=admin
    uv run python scripts/bench_register.py [--num-docs 100]

  With Keycloak:
    export KEYCLOAK_URL=http://localhost:8080 KEYCLOAK_REALM=docregistry
    export KEYCLOAK_CLIENT_ID=docregistry-api KEYCLOAK_CLIENT_SECRET=docregistry-api-secret
    export BENCH_USER=admin BENCH_PASSWORD=adminpass
    uv run python scripts/bench_register.py --keycloak
"""
from __future__ import annotations

import argparse
import hashlib
import os
import statistics
import sys
import time
import uuid

import httpx


def get_token(
    keycloak_url: str,
    realm: str,
    client_id: str,
    client_secret: str,
    username: str,
    password: str,
) -> str:
    url = f"{keycloak_url.rstrip('/')}/realms/{realm}/protocol/openid-connect/token"
    r = httpx.post(
        url,
        data={
            "grant_type": "password",
            "client_id": client_id,
            "client_secret": client_secret,
            "username": username,
            "password": password,
        },
        headers={"Content-Type": "application/x-www-form-urlencoded"},
        timeout=30.0,
    )
    r.raise_for_status()
    return r.json()["access_token"]


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark document registration")
    parser.add_argument("--num-docs", type=int, default=50, help="Number of documents to register")
    parser.add_argument("--keycloak", action="store_true", help="Authenticate via Keycloak")
    parser.add_argument("--output", type=str, default="/results/bench_register.txt", help="Output file path")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    if args.keycloak:
        print("Getting token...")
        token = get_token(
            os.environ.get("KEYCLOAK_URL", "http://localhost:8080"),
            os.environ.get("KEYCLOAK_REALM", "docregistry"),
            os.environ.get("KEYCLOAK_CLIENT_ID", "docregistry-api"),
            os.environ.get("KEYCLOAK_CLIENT_SECRET", "docregistry-api-secret"),
            os.environ.get("BENCH_USER", "admin"),
            os.environ.get("BENCH_PASSWORD", "adminpass"),
        )
        headers = {"Authorization": f"Bearer {token}"}
    else:
        headers = {"X-Caller-Identity": os.environ.get("BENCH_IDENTITY", "admin")}

    run_id = uuid.uuid4().hex[:8]
    latencies: list[float] = []
    errors = 0

    print(f"Registering {args.num_docs} documents (run {run_id})...")
    start_total = time.perf_counter()
    with httpx.Client(timeout=60.0) as client:
        for i in range(args.num_docs):
            payload = f"{run_id}-{i}".encode()
            t0 = time.perf_counter()
            r = client.post(
                f"{api_url}/v1/documents",
                json={
                    "locator": f"bench://{run_id}/{i}",
                    "title": f"bench-{run_id}-{i}",
                    "content_hash": hashlib.sha256(payload).hexdigest(),
                },
                headers=headers,
            )
            elapsed = time.perf_counter() - t0
            if r.status_code == 201:
                latencies.append(elapsed)
            else:
                errors += 1
    total_elapsed = time.perf_counter() - start_total

    n = len(latencies)
    if n == 0:
        print("No successful registrations.")
        return 1

    docs_per_sec = n / total_elapsed
    p50 = statistics.median(latencies) * 1000
    p95 = sorted(latencies)[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    p99 = sorted(latencies)[int(n * 0.99) - 1] * 1000 if n >= 100 else p95

    summary = (
        f"Register benchmark (n={n}, errors={errors})\n"
        f"  Throughput: {docs_per_sec:.2f} docs/s\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms, p99={p99:.1f} ms\n"
        f"  Total time: {total_elapsed:.2f} s\n"
    )
    print(summary)

    try:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")
    except OSError:
        pass

    return 0


if __name__ == "__main__":
    sys.exit(main())
