"""
Catsync: minimizer and syncmer sampling schemes for long sequences.

Orders rank k-mers, minimizers pick the smallest k-mer of every window, and
open/closed syncmers classify k-mers by where their smallest t-mer falls.
The hashing layer computes k-mer digests one by one or in batched buffers.
"""

__version__ = "0.1.0a0"

from catsync.hashers import Hasher, FxHash, PolyHash, NtHash, XxHash
from catsync.buffers import Unbuffered, Buffer, Buffer2, BufferDouble
from catsync.order import Order, ToOrder, RandomOrder, RandomO, LexOrder, LexO
from catsync.minimizer import Minimizer
from catsync.open_closed import OpenClosed, OpenClosedO
from catsync.sampling import sample_positions, sampled_positions, density

__all__ = [
    "Hasher",
    "FxHash",
    "PolyHash",
    "NtHash",
    "XxHash",
    "Unbuffered",
    "Buffer",
    "Buffer2",
    "BufferDouble",
    "Order",
    "ToOrder",
    "RandomOrder",
    "RandomO",
    "LexOrder",
    "LexO",
    "Minimizer",
    "OpenClosed",
    "OpenClosedO",
    "sample_positions",
    "sampled_positions",
    "density",
]
