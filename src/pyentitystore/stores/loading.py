"""Loading flag store."""

from __future__ import annotations

from pyentitystore.stores._observable import Observable


class LoadingStore(Observable):
    """Base for stores that report whether an async operation is in flight.

    Example::

        class ReportStore(LoadingStore):
            async def build(self) -> None:
                self.set_is_loading(True)
                try:
                    ...
                finally:
                    self.set_is_loading(False)
    """

    def __init__(self) -> None:
        super().__init__()
        self._is_loading = False

    def set_is_loading(self, is_loading: bool) -> None:
        self._is_loading = is_loading
        self._notify("is_loading")

    @property
    def is_loading(self) -> bool:
        return self._is_loading
