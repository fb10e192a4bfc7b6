"""
Payment method normalization.

The tickets table only stores ``Debito`` and ``Credito``. Cash and bank
transfer tickets are stored as ``Debito`` and the method the user actually
picked is kept in the ticket metadata under ``original_payment_method``.
"""

from typing import Any, Mapping, NamedTuple, Optional

from .models import PaymentMethod, RequestedPaymentMethod

ORIGINAL_PAYMENT_METHOD_KEY = 'original_payment_method'

# Requested methods stored as Debito
FALLBACK_METHODS = frozenset({
    RequestedPaymentMethod.EFECTIVO,
    RequestedPaymentMethod.TRANSFERENCIA,
})


class NormalizedPayment(NamedTuple):
    payment_method: str
    metadata: dict


def normalize_payment_method(
    requested: str,
    metadata: Optional[Mapping[str, Any]] = None
) -> NormalizedPayment:
    """
    Map a requested payment method to the stored one.

    Args:
        requested: One of ``RequestedPaymentMethod`` values.
        metadata: Current ticket metadata (not modified).

    Returns:
        NormalizedPayment: persisted method and the metadata to store.
        For ``Efectivo``/``Transferencia`` the metadata is a copy with
        ``original_payment_method`` set; otherwise it is returned as is.

    Raises:
        ValueError: If ``requested`` is not a known method. Input
            serializers reject those before reaching this point.

    Example::

        >>> normalize_payment_method('Efectivo', {})
        NormalizedPayment(payment_method='Debito', metadata={'original_payment_method': 'Efectivo'})
    """
    current = dict(metadata or {})

    if requested in FALLBACK_METHODS:
        current[ORIGINAL_PAYMENT_METHOD_KEY] = str(RequestedPaymentMethod(requested).value)
        return NormalizedPayment(PaymentMethod.DEBITO.value, current)

    if requested in PaymentMethod.values:
        return NormalizedPayment(PaymentMethod(requested).value, current)

    raise ValueError(f"Unknown payment method: {requested!r}")
