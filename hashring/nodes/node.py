# hashring/nodes/node.py

import dataclasses
from dataclasses import dataclass


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Node:
    """
    Identitas dan metadata penempatan sebuah endpoint fisik.

    Hanya `id` dan `weight` yang dipakai oleh algoritma ring (plus `address`
    sebagai bagian dari kunci virtual node). `port` dan `host_name` hanya
    deskriptif. Node tidak bisa diubah setelah dibuat: untuk mengganti weight
    atau address, lakukan remove lalu add.
    """
    id: int
    address: str
    port: int = 0
    host_name: str = ""
    weight: int = 1

    def __post_init__(self):
        if not _is_int(self.id) or self.id <= 0:
            raise ValueError(f"Node id must be a positive integer, got {self.id!r}")
        if not _is_int(self.weight) or self.weight < 1:
            raise ValueError(f"Node weight must be an integer >= 1, got {self.weight!r}")

    def copy(self):
        """Salinan baru yang setara; ring hanya menyimpan salinan."""
        return dataclasses.replace(self)


def new_node(id, address, port, host_name, weight):
    return Node(id=id, address=address, port=port, host_name=host_name, weight=weight)
