from typing import Callable, Generic, Optional, TypeVar
import threading


T = TypeVar("T")


class InitOnce(Generic[T]):
    """
    Thread-safe lazy holder for a single shared instance.

    The guard is an ordinary object: whoever owns it (normally the
    application entry point) hands it, or the instance it resolves, to the
    code that needs it. No class-level registry is involved, so two guards
    always hold two independent instances.
    """

    def __init__(self, factory: Callable[[], T]):
        self._factory = factory
        self._instance: Optional[T] = None
        self._lock: threading.Lock = threading.Lock()

    def get(self) -> T:
        """
        Get the guarded instance, creating it on first access.

        Uses double-checked locking: the lock is only taken while the
        instance does not exist yet, and the factory runs at most once.

        Returns:
            The single instance produced by the factory.
        """
        instance = self._instance
        if instance is None:
            with self._lock:
                if self._instance is None:
                    self._instance = self._factory()
                instance = self._instance
        return instance

    @property
    def initialized(self) -> bool:
        return self._instance is not None

    def reset(self):
        """
        Drop the held instance so the next `get` builds a fresh one.
        This method should be used carefully, mainly for testing purposes.
        """
        with self._lock:
            self._instance = None
