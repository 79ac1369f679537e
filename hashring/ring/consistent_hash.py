# hashring/ring/consistent_hash.py

import bisect
import logging
import threading
import time
from collections import Counter, namedtuple
from types import MappingProxyType

from ..errors import EmptyRingError
from ..utils import config
from ..utils.hashing import resolve_hash_function, virtual_key
from ..utils.metrics import increment_counter, record_latency

logger = logging.getLogger(__name__)

CANONICAL = "canonical"
LEGACY = "legacy"
SUCCESSOR_MODES = (CANONICAL, LEGACY)

# Snapshot ring yang sudah dipublikasikan. Tidak pernah diubah setelah dibuat.
RingState = namedtuple("RingState", ["nodes", "sorted_hashes", "registry"])

_EMPTY_STATE = RingState(MappingProxyType({}), (), frozenset())


class ConsistentHashRing:
    """
    Consistent hashing ring dengan virtual node berbobot.

    Setiap node fisik menempati `replicas * weight` posisi di ring 32-bit.
    Lookup mencari posisi pertama yang >= hash key (searah jarum jam) dan
    kembali ke awal ring jika tidak ada. Mode "legacy" meniru routing lama
    (lihat _search).

    Mutasi (add/remove) diserialisasi oleh satu lock dan membangun snapshot
    baru di samping, lalu mempublikasikannya dengan satu assignment. Lookup
    hanya membaca snapshot yang sedang aktif, jadi tidak pernah melihat ring
    yang setengah jadi dan tidak perlu menunggu writer.

    Catatan kontrak: remove menghitung ulang kunci virtual dari weight node
    yang diberikan. Jika weight berbeda dari saat add, entri lama tertinggal
    di ring. Hal ini tidak dicek di sini; pemanggil harus memberikan node yang
    sama. Tabrakan hash antar kunci virtual ditimpa oleh insert terakhir,
    sehingga jumlah replika efektif bisa sedikit kurang dari replicas * weight.
    """

    def __init__(self, replicas=None, hash_function=None, successor_mode=None):
        if replicas is None:
            replicas = config.DEFAULT_REPLICAS
        if hash_function is None:
            hash_function = config.HASH_FUNCTION
        if successor_mode is None:
            successor_mode = config.SUCCESSOR_MODE

        if isinstance(replicas, bool) or not isinstance(replicas, int) or replicas < 1:
            raise ValueError(f"replicas must be an integer >= 1, got {replicas!r}")
        successor_mode = str(successor_mode).lower()
        if successor_mode not in SUCCESSOR_MODES:
            raise ValueError(
                f"Unknown successor mode '{successor_mode}', expected one of {SUCCESSOR_MODES}"
            )

        self.replicas = replicas
        self.successor_mode = successor_mode
        self._hash = resolve_hash_function(hash_function)
        self._write_lock = threading.Lock()
        self._state = _EMPTY_STATE

    # --------------------------------------------------------------------------
    # MUTASI
    # --------------------------------------------------------------------------

    def add(self, node):
        """
        Mendaftarkan node dan semua virtual node-nya.
        Mengembalikan False (tanpa mengubah ring) jika id sudah terdaftar.
        """
        start_time = time.perf_counter()
        with self._write_lock:
            state = self._state
            if node.id in state.registry:
                increment_counter("ring_add_rejected")
                return False

            stored = node.copy()
            nodes = dict(state.nodes)
            for hash_value in self._virtual_hashes(node):
                nodes[hash_value] = stored

            self._publish(nodes, state.registry | {node.id})
            logger.debug(
                f"Node {node.id} added (weight={node.weight}, "
                f"vnodes={self.replicas * node.weight}, ring_size={len(nodes)})"
            )
        record_latency("ring_add", start_time)
        return True

    def remove(self, node):
        """Menghapus node dari ring. Node yang tidak terdaftar diabaikan."""
        start_time = time.perf_counter()
        with self._write_lock:
            state = self._state
            if node.id not in state.registry:
                increment_counter("ring_remove_ignored")
                return

            nodes = dict(state.nodes)
            for hash_value in self._virtual_hashes(node):
                nodes.pop(hash_value, None)

            self._publish(nodes, state.registry - {node.id})
            logger.debug(f"Node {node.id} removed (ring_size={len(nodes)})")
        record_latency("ring_remove", start_time)

    def _virtual_hashes(self, node):
        for i in range(self.replicas * node.weight):
            yield self._hash(virtual_key(i, node))

    def _publish(self, nodes, registry):
        # Sort ulang dari seluruh mapping, lalu ganti snapshot sekaligus
        self._state = RingState(
            MappingProxyType(nodes), tuple(sorted(nodes)), frozenset(registry)
        )

    # --------------------------------------------------------------------------
    # LOOKUP
    # --------------------------------------------------------------------------

    def get(self, key):
        """Mengembalikan Node yang memiliki key ini."""
        state = self._state
        if not state.sorted_hashes:
            raise EmptyRingError()
        index = self._search(state.sorted_hashes, self._hash(key))
        return state.nodes[state.sorted_hashes[index]]

    def get_hash(self, key):
        """Posisi key di ring (hash 32-bit)."""
        return self._hash(key)

    def _search(self, sorted_hashes, hash_value):
        index = bisect.bisect_left(sorted_hashes, hash_value)
        last = len(sorted_hashes) - 1
        if self.successor_mode == LEGACY:
            # Routing lama: lower bound di index terakhir -> index 0,
            # tidak ada posisi >= hash -> index terakhir
            if index == last:
                return 0
            if index > last:
                return last
            return index
        if index > last:
            return 0
        return index

    # --------------------------------------------------------------------------
    # INTROSPEKSI (read-only)
    # --------------------------------------------------------------------------

    @property
    def nodes(self):
        """Mapping read-only hash -> Node dari snapshot saat ini."""
        return self._state.nodes

    @property
    def sorted_hashes(self):
        return self._state.sorted_hashes

    def members(self):
        """Id node yang sedang terdaftar, terurut."""
        return tuple(sorted(self._state.registry))

    def distribution(self, keys):
        """Menghitung berapa key yang dimiliki tiap node (node id -> jumlah)."""
        state = self._state
        if not state.sorted_hashes:
            raise EmptyRingError()
        counts = Counter()
        for key in keys:
            index = self._search(state.sorted_hashes, self._hash(key))
            counts[state.nodes[state.sorted_hashes[index]].id] += 1
        return counts

    def __contains__(self, node):
        node_id = getattr(node, "id", node)
        return node_id in self._state.registry

    def __len__(self):
        return len(self._state.registry)

    def __repr__(self):
        state = self._state
        return (
            f"ConsistentHashRing(nodes={len(state.registry)}, positions={len(state.sorted_hashes)}, "
            f"replicas={self.replicas}, successor_mode='{self.successor_mode}')"
        )
