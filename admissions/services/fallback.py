from dataclasses import dataclass
import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


@dataclass
class FallbackChain:
    """Сначала реальный источник, при неудаче - подстановка.

    primary возвращает None, если источник пропущен (например, сервис не прошел health check).
    Любое исключение primary, кроме passthrough, поглощается. substitute не должен бросать.
    """

    primary: Callable[[], Any]
    substitute: Callable[[], Any]
    name: str = "fallback"
    passthrough: tuple[type[BaseException], ...] = ()

    def __call__(self):
        try:
            result = self.primary()
        except self.passthrough:
            raise
        except Exception as exc:
            logger.error("%s: primary source failed - %s", self.name, exc, exc_info=True)
            result = None
        if result is None:
            logger.warning("%s: using substitute source", self.name)
            return self.substitute()
        return result
