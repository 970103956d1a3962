# shared/models/order.py
from tortoise import Model, fields


class Order(Model):
    """
    Order model referencing one main dish, ordered side dishes and an optional dessert.

    Dishes are referenced by identity, so prices are always read from the catalog.
    """

    id = fields.UUIDField(pk=True)
    main_dish = fields.ForeignKeyField(
        "models.Dish", related_name="main_orders", on_delete=fields.RESTRICT
    )
    dessert = fields.ForeignKeyField(
        "models.Dish", related_name="dessert_orders", null=True, on_delete=fields.RESTRICT
    )
    created_at = fields.DatetimeField(auto_now_add=True, index=True)

    side_items: fields.ReverseRelation["OrderSideDish"]

    class Meta:
        table = "orders"
        ordering = ["created_at"]

    def __str__(self) -> str:
        return f"Order {self.id} at {self.created_at}"


class OrderSideDish(Model):
    """
    One side dish slot of an order. Position keeps the order the sides were requested in.
    """

    id = fields.IntField(pk=True)
    order = fields.ForeignKeyField("models.Order", related_name="side_items", on_delete=fields.CASCADE)
    dish = fields.ForeignKeyField("models.Dish", related_name="side_orders", on_delete=fields.RESTRICT)
    position = fields.IntField()

    class Meta:
        table = "order_side_dishes"
        ordering = ["order_id", "position"]

    def __str__(self) -> str:
        return f"Side #{self.position} of order {self.order_id}"
