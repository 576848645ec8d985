# freshcart/services/errors.py


class NotFoundError(LookupError):
    """Requested product, order, user or payment does not exist."""


class GatewayError(RuntimeError):
    """Payment gateway could not be reached or rejected the request."""


class InvalidPaymentTransition(ValueError):
    def __init__(self, current: str, target: str):
        super().__init__(f"Payment cannot move from '{current}' to '{target}'")
        self.current = current
        self.target = target
