# hashring/utils/config.py

import os
from dotenv import load_dotenv

load_dotenv()

# Jumlah posisi virtual per satu unit weight.
# Lebih besar = distribusi key lebih rata, tapi ring lebih besar dan sort lebih mahal.
DEFAULT_REPLICAS = int(os.getenv("HASHRING_REPLICAS", 160))

# "crc32" (kompatibel dengan routing lama) atau "murmur3"
HASH_FUNCTION = os.getenv("HASHRING_HASH_FUNCTION", "crc32")

# "canonical": wrap ke index 0 hanya jika tidak ada posisi >= hash key
# "legacy": routing lama, lower bound di index terakhir -> index 0,
#           tidak ada posisi >= hash key -> index terakhir
SUCCESSOR_MODE = os.getenv("HASHRING_SUCCESSOR_MODE", "canonical")

# Dipakai oleh entry point (benchmark) saat memanggil logging.basicConfig
LOG_LEVEL = os.getenv("HASHRING_LOG_LEVEL", "INFO").upper()
