from contextlib import contextmanager


@contextmanager
def transactional(store):
    """Context manager for store transactions (MULTI/EXEC)."""
    tx = store.pipeline()
    try:
        yield tx
    except Exception:
        tx.discard()
        raise
    if len(tx):
        tx.execute()
    else:
        tx.discard()
