from typing import Callable, List, Optional

Callback = Callable[[], None]


def join_callbacks(callback: Optional[Callback], count: int) -> List[Optional[Callback]]:
    """
    Build ``count`` completion hooks that together act as a barrier.

    ``callback`` runs once, when the last of the hooks has been called.
    Each hook only counts the first time it is called.

    Args:
        callback: Function to run after every hook fired. ``None`` disables the join.
        count: Number of independent completions to wait for.

    Returns:
        A list of ``count`` zero-argument hooks, or ``count`` Nones when
        there is nothing to notify.
    """
    if callback is None:
        return [None] * count

    pending = set(range(count))

    def make_hook(index: int) -> Callback:
        def hook() -> None:
            if index not in pending:
                return
            pending.discard(index)
            if not pending:
                callback()
        return hook

    return [make_hook(i) for i in range(count)]
