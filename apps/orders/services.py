"""
Order placement.

place_order() is the only code path that creates orders. Within a single
transaction it locks the referenced product rows, prices every line from the
database (base price plus selected option surcharges), checks stock, writes
the Order and its OrderItems, and decrements stock with a conditional update
so stock can never go negative even if two orders race for the last unit.
Any failure rolls the whole order back.
"""

import logging
import uuid
from collections import defaultdict
from decimal import Decimal

from django.db import transaction
from django.db.models import F, Prefetch

from apps.catalog.models import Option, OptionGroup, Product
from apps.core.models import Store

from .exceptions import InsufficientStock, InvalidOrderRequest, OrderError, ProductNotFound
from .models import Order, OrderItem

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def place_order(store_id, items):
    """
    Place a kiosk order.

    Args:
        store_id: Public store identifier (UUID or its string form)
        items: List of line items, each a dict with ``product_id``,
            ``quantity`` (>= 1) and optional ``selected_options`` mapping an
            option group key (group id as a string, or group name) to
            ``{"option_id": <id>, ...}``

    Returns:
        Order: The committed order

    Raises:
        InvalidOrderRequest: Empty or malformed items, or unknown store
        ProductNotFound: A product id is not a product of this store
        InsufficientStock: A product has less stock than requested
    """
    try:
        lines = _normalize_items(items)
        store = _get_store(store_id)

        with transaction.atomic():
            order = _create_order(store, lines)
    except OrderError as e:
        logger.warning(
            "Order rejected: %s",
            e.message,
            extra={"store_id": str(store_id), "reason": e.message},
        )
        raise

    logger.info(
        "Order %s placed for store %s, total %s",
        order.pk,
        store.pk,
        order.total_amount,
        extra={
            "order_id": order.pk,
            "store_id": str(store.pk),
            "total_amount": str(order.total_amount),
        },
    )
    return order


def _create_order(store, lines):
    requested = defaultdict(int)
    for line in lines:
        requested[line["product_id"]] += line["quantity"]

    products = _lock_products(store, sorted(requested))

    for line in lines:
        if line["product_id"] not in products:
            raise ProductNotFound(line["product_id"])

    for product_id, quantity in requested.items():
        product = products[product_id]
        if product.stock < quantity:
            raise InsufficientStock(product.name, product.stock, quantity)

    total = Decimal("0.00")
    order_items = []
    for line in lines:
        product = products[line["product_id"]]
        unit_price = calculate_unit_price(product, line["selected_options"])
        total += unit_price * line["quantity"]
        order_items.append(
            OrderItem(
                product=product,
                quantity=line["quantity"],
                price_per_item=unit_price,
                selected_options=line["selected_options"],
            )
        )

    order = Order.objects.create(store=store, total_amount=total.quantize(CENTS))
    for order_item in order_items:
        order_item.order = order
    OrderItem.objects.bulk_create(order_items)

    for product_id in sorted(requested):
        quantity = requested[product_id]
        updated = Product.objects.filter(pk=product_id, stock__gte=quantity).update(
            stock=F("stock") - quantity
        )
        if not updated:
            available = Product.objects.filter(pk=product_id).values_list("stock", flat=True)
            raise InsufficientStock(products[product_id].name, available.first(), quantity)

    return order


def _lock_products(store, product_ids):
    """
    Load and lock the store's products in ascending id order.

    Returns:
        dict: product id -> Product with option groups and options prefetched
    """
    queryset = (
        Product.objects.select_for_update()
        .filter(store=store, id__in=product_ids)
        .order_by("id")
        .prefetch_related(
            Prefetch(
                "option_groups",
                queryset=OptionGroup.objects.prefetch_related(
                    Prefetch("options", queryset=Option.objects.order_by("id"))
                ),
            )
        )
    )
    return {product.id: product for product in queryset}


def calculate_unit_price(product, selected_options):
    """
    Effective unit price: product price plus the price of each selected option.

    A selection key matches one of the product's option groups by id (as a
    string) or by name; the option is then matched by ``option_id`` inside
    that group. Keys or options that match nothing add zero.

    Args:
        product: Product with option_groups (and their options) loaded
        selected_options: Dict of group key -> selection dict

    Returns:
        Decimal: Unit price for one item
    """
    price = product.price
    if not selected_options:
        return price

    groups = list(product.option_groups.all())
    for key, selection in selected_options.items():
        if not selection:
            continue
        group = _match_group(groups, key)
        if group is None:
            continue
        option_id = _to_int(selection.get("option_id"))
        for option in group.options.all():
            if option.id == option_id:
                price += option.price
                break

    return price


def _match_group(groups, key):
    key = str(key)
    for group in groups:
        if str(group.id) == key:
            return group
    for group in groups:
        if group.name == key:
            return group
    return None


def _get_store(store_id):
    try:
        store_uuid = uuid.UUID(str(store_id))
    except (TypeError, ValueError):
        raise InvalidOrderRequest("Store not found.")

    store = Store.objects.filter(pk=store_uuid).first()
    if store is None:
        raise InvalidOrderRequest("Store not found.")
    return store


def _normalize_items(items):
    if not isinstance(items, (list, tuple)) or not items:
        raise InvalidOrderRequest("At least one item is required.")

    lines = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise InvalidOrderRequest(f"Item {index} is malformed.")

        product_id = _to_int(item.get("product_id"))
        if product_id is None or product_id < 1:
            raise InvalidOrderRequest(f"Item {index} has an invalid product_id.")

        quantity = _to_int(item.get("quantity"))
        if quantity is None or quantity < 1:
            raise InvalidOrderRequest(f"Item {index} must have a quantity of at least 1.")

        selected_options = item.get("selected_options") or {}
        if not isinstance(selected_options, dict) or not all(
            selection is None or isinstance(selection, dict)
            for selection in selected_options.values()
        ):
            raise InvalidOrderRequest(f"Item {index} has malformed selected_options.")

        lines.append(
            {
                "product_id": product_id,
                "quantity": quantity,
                "selected_options": selected_options,
            }
        )

    return lines


def _to_int(value):
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None
