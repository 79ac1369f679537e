# benchmark/distribution_report.py
"""
Laporan distribusi key per IP node untuk ring contoh (172.18.1.<i>:8080).

Id node dimulai dari 1, bukan 0 seperti driver lama, karena id harus positif.
Id ikut masuk ke kunci virtual node, jadi posisi di ring dan jumlah key per IP
tidak akan sama persis dengan output driver lama, walaupun memakai crc32 dan
mode legacy.
"""

import argparse
import logging
import time
from collections import Counter

from hashring.nodes.node import new_node
from hashring.ring.consistent_hash import ConsistentHashRing, SUCCESSOR_MODES
from hashring.utils import config
from hashring.utils.hashing import HASH_FUNCTIONS
from hashring.utils.metrics import get_metrics


def build_ring(node_count, replicas, hash_function, successor_mode):
    """Membuat ring berisi node contoh 172.18.1.<i>:8080 dengan weight 1."""
    ring = ConsistentHashRing(replicas=replicas, hash_function=hash_function, successor_mode=successor_mode)
    for i in range(node_count):
        ring.add(new_node(i + 1, f"172.18.1.{i}", 8080, f"host_{i}", 1))
    return ring


def count_by_address(ring, key_count):
    """Jumlah key per IP node, sama seperti laporan driver lama."""
    counts = Counter()
    for i in range(key_count):
        counts[ring.get(f"key{i}").address] += 1
    return counts


def main(argv=None):
    parser = argparse.ArgumentParser(description="Laporan distribusi key pada consistent hash ring")
    parser.add_argument("--nodes", type=int, default=10)
    parser.add_argument("--keys", type=int, default=1000)
    parser.add_argument("--replicas", type=int, default=config.DEFAULT_REPLICAS)
    parser.add_argument("--hash", choices=sorted(HASH_FUNCTIONS), default=config.HASH_FUNCTION)
    parser.add_argument("--mode", choices=SUCCESSOR_MODES, default=config.SUCCESSOR_MODE)
    parser.add_argument("--show-ring", action="store_true", help="Cetak semua posisi hash -> IP")
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')

    ring = build_ring(args.nodes, args.replicas, args.hash, args.mode)
    logging.info(f"Ring built: {ring!r}")

    if args.show_ring:
        for hash_value, node in ring.nodes.items():
            print(f"Hash: {hash_value}  IP {node.address}")

    start_time = time.perf_counter()
    counts = count_by_address(ring, args.keys)
    elapsed_ms = (time.perf_counter() - start_time) * 1000
    logging.info(f"{args.keys} lookups in {elapsed_ms:.2f} ms")

    for address, count in sorted(counts.items()):
        print(f"Node IP: {address}  count: {count}")

    for name, data in get_metrics().items():
        logging.info(f"{name}: {data}")
    return counts


if __name__ == "__main__":
    main()
