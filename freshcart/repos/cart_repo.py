# freshcart/repos/cart_repo.py
"""
Przechowywanie koszyka sesji.

Koszyk nie trafia do bazy relacyjnej - to stan sesji. Na produkcji
trzymany w Redis jako JSON z TTL (kazdy zapis przedluza waznosc),
w testach w slowniku.
"""
import json
from abc import ABC, abstractmethod
from typing import Dict

import redis

from freshcart.domain.cart import CartAggregate
from freshcart.utils.retry import redis_retry
from freshcart.utils.settings import REDIS_URL, CART_TTL_SECONDS
from freshcart.utils.logging import get_logger

logger = get_logger(__name__)


class CartRepo(ABC):
    @abstractmethod
    def load(self, session_id: str) -> CartAggregate:
        """Cart for the session, empty when nothing is stored."""
        ...

    @abstractmethod
    def save(self, session_id: str, cart: CartAggregate) -> None:
        ...

    @abstractmethod
    def delete(self, session_id: str) -> None:
        ...


class RedisCartRepo(CartRepo):
    def __init__(self, url: str | None = None, ttl: int = CART_TTL_SECONDS, client: redis.Redis | None = None):
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )
        self.ttl = ttl

    @staticmethod
    def _key(session_id: str) -> str:
        return f"cart:{session_id}"

    @redis_retry()
    def load(self, session_id: str) -> CartAggregate:
        raw = self.redis.get(self._key(session_id))
        if not raw:
            return CartAggregate()
        return CartAggregate.from_dict(json.loads(raw))

    @redis_retry()
    def save(self, session_id: str, cart: CartAggregate) -> None:
        if cart.is_empty():
            self.redis.delete(self._key(session_id))
            return
        # SET cart:<sesja> <json> EX ttl
        self.redis.set(
            name=self._key(session_id),
            value=json.dumps(cart.to_dict()),
            ex=self.ttl,
        )

    @redis_retry()
    def delete(self, session_id: str) -> None:
        logger.info(f"Clearing cart for session {session_id}")
        self.redis.delete(self._key(session_id))


class MemoryCartRepo(CartRepo):
    def __init__(self):
        self.carts: Dict[str, dict] = {}

    def load(self, session_id: str) -> CartAggregate:
        data = self.carts.get(session_id)
        return CartAggregate.from_dict(data) if data else CartAggregate()

    def save(self, session_id: str, cart: CartAggregate) -> None:
        if cart.is_empty():
            self.carts.pop(session_id, None)
            return
        self.carts[session_id] = cart.to_dict()

    def delete(self, session_id: str) -> None:
        self.carts.pop(session_id, None)
