from joblib import Memory
from radiipoly.paths import PERSISTENT_CACHE_DIR


def _init_persistent_cache():
    memory = Memory(PERSISTENT_CACHE_DIR, verbose=-1)
    return memory.cache


def clear_cache():
    """Removes every cached artefact (e.g approximate zeros of the example problems)."""
    memory = Memory(PERSISTENT_CACHE_DIR, verbose=-1)
    memory.clear(warn=True)


persistent_cache = _init_persistent_cache()
