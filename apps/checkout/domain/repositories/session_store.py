"""
Session store interface.

The only checkout state that survives a page reload: two opaque backend ids,
the discount record id and the shopper's bearer token.
"""
from abc import ABC, abstractmethod
from typing import Optional

USER_TOKEN_KEY = 'userToken'
CART_ID_KEY = 'cartId'
ADDRESS_ID_KEY = 'addressId'
DISCOUNT_ID_KEY = 'discountId'


class SessionStore(ABC):
    """String key/value storage scoped to one shopper session."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        pass

    @property
    def auth_token(self) -> Optional[str]:
        return self.get(USER_TOKEN_KEY)
