"""Unbuffered rendezvous channel between pipeline stages.

A send completes only once a receiver has taken the item, so at most one
item is ever in flight between a producer and its consumer.
"""

import threading
from collections.abc import Iterator
from typing import Generic, TypeVar

from glyphstrip.exceptions import ChannelClosedError

T = TypeVar("T")


class Channel(Generic[T]):
    """Single-producer, single-consumer hand-off with close semantics.

    Example:
        channel: Channel[str] = Channel("units")
        # producer thread
        channel.send("Hi")
        channel.close()
        # consumer thread
        for unit in channel:
            ...
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._cond = threading.Condition()
        self._item: T | None = None
        self._pending = False
        self._sent = 0
        self._received = 0
        self._closed = False
        self._error: BaseException | None = None

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def send(self, item: T) -> None:
        """Hand an item to the receiver, blocking until it is taken.

        Raises:
            ChannelClosedError: If the channel is or becomes closed before
                the item was taken
        """
        with self._cond:
            while self._pending and not self._closed:
                self._cond.wait()
            if self._closed:
                raise ChannelClosedError(self.name)

            self._item = item
            self._pending = True
            self._sent += 1
            ticket = self._sent
            self._cond.notify_all()

            while self._received < ticket and not self._closed:
                self._cond.wait()
            if self._received < ticket:
                self._item = None
                self._pending = False
                raise ChannelClosedError(self.name)

    def recv(self) -> T:
        """Take the next item, blocking until one is sent.

        Raises:
            StopIteration: If the channel was closed cleanly
            BaseException: The error the channel was closed with
        """
        with self._cond:
            while not self._pending and not self._closed:
                self._cond.wait()
            if self._pending:
                item = self._item
                self._item = None
                self._pending = False
                self._received += 1
                self._cond.notify_all()
                return item  # type: ignore[return-value]
            if self._error is not None:
                raise self._error
            raise StopIteration

    def close(self, error: BaseException | None = None) -> None:
        """Close the channel.

        A clean close lets the receiver finish iterating. Closing with an
        error discards any item not yet taken and makes the receiver raise
        the error. Only the first close takes effect.
        """
        with self._cond:
            if self._closed:
                return
            self._closed = True
            self._error = error
            if error is not None:
                self._item = None
                self._pending = False
            self._cond.notify_all()

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                item = self.recv()
            except StopIteration:
                return
            yield item

    def __repr__(self) -> str:
        return f"Channel({self.name}, closed={self._closed})"
