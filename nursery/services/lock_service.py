import redis

from nursery.utils.retry import redis_retry
from nursery.utils.settings import REDIS_URL
from nursery.utils.logging import get_logger

logger = get_logger(__name__)

#LUA porownaj i usun, atomicity
_RELEASE_LUA = """
if redis.call('GET', KEYS[1]) == ARGV[1] then
    return redis.call('DEL', KEYS[1])
else
    return 0
end
"""

#redis wykonuje skrypt lua atomowo, nikt nie wcisnie sie miedzy GET a DEL
#wiec zwalniamy tylko swoj wlasny lock (token), nie cudzy ktory przejal klucz po TTL


class LockService:
    """
    -blokada checkoutu klienta (jeden checkout naraz na klienta)
    -zwalnianie blokady tylko przez wlasciciela tokena
    -TTL, wiec padniety proces nie blokuje klienta na zawsze
    """

    def __init__(self, url: str | None = None):
        self.redis = redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )

    @staticmethod
    def _checkout_key(customer_id: int) -> str:
        return f"checkout:{customer_id}:lock"

    @redis_retry()
    def acquire_checkout_lock(self, customer_id: int, token: str, ttl: int) -> bool:
        key = self._checkout_key(customer_id)
        logger.info(f"Acquire lock {key}")
        #SET checkout:1:lock "<token>" NX EX 30
        return bool(
            self.redis.set(
                name=key,
                value=token,
                nx=True,
                ex=ttl,
            )
        )

    @redis_retry()
    def release_checkout_lock(self, customer_id: int, token: str) -> bool:
        key = self._checkout_key(customer_id)
        logger.info(f"Release lock {key}")
        res = self.redis.eval(_RELEASE_LUA, 1, key, token)
        return bool(res)
