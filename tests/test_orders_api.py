"""
Tests for the order, menu and report HTTP endpoints.
"""

import pytest

from shared.models.order import Order


MISSING_ID = "7f1c1f0e-2b8e-4b53-9a55-3c4b1f0d9e21"


async def post_order(client, api_prefix, **payload):
    return await client.post(f"{api_prefix}/orders", json=payload)


class TestOrderEndpoints:
    """CRUD over /orders"""

    async def test_create_order(self, client, api_prefix):
        response = await post_order(
            client, api_prefix, mainDish="Rice", sideDishes=["Wadai", "Dhal curry"], dessert="Jelly"
        )

        assert response.status_code == 201
        data = response.json()
        assert data["main_dish"]["name"] == "Rice"
        assert data["main_dish"]["price"] == "100.00"
        assert [d["name"] for d in data["side_dishes"]] == ["Wadai", "Dhal curry"]
        assert data["dessert"] == {
            "id": data["dessert"]["id"], "category": "dessert", "name": "Jelly", "price": "20.00"
        }

    async def test_create_without_sides(self, client, api_prefix):
        response = await post_order(client, api_prefix, mainDish="Rice", sideDishes=[])

        assert response.status_code == 400
        assert response.json()["detail"] == "You must order at least one main dish and one side dish"

    @pytest.mark.parametrize("payload", [
        {"mainDish": "Rice", "sideDishes": "Wadai"},
        {"mainDish": ["Rice"], "sideDishes": ["Wadai"]},
        {"mainDish": "Rice", "sideDishes": [{"name": "Wadai"}]},
        {"mainDish": "Rice", "sideDishes": ["Wadai"], "dessert": 20},
    ])
    async def test_create_with_mistyped_body(self, client, api_prefix, payload):
        """Wrongly typed fields are a bad request, like missing ones."""
        response = await post_order(client, api_prefix, **payload)

        assert response.status_code == 400
        assert await Order.all().count() == 0

    async def test_create_with_unknown_side(self, client, api_prefix):
        response = await post_order(client, api_prefix, mainDish="Rice", sideDishes=["Salad"])

        assert response.status_code == 404
        assert response.json()["detail"] == "Side dish Salad not found"
        assert await Order.all().count() == 0

    async def test_create_with_wrong_category(self, client, api_prefix):
        response = await post_order(client, api_prefix, mainDish="Pudding", sideDishes=["Wadai"])

        assert response.status_code == 400

    async def test_list_and_get(self, client, api_prefix):
        created = (await post_order(client, api_prefix, mainDish="Rotty", sideDishes=["Wadai"])).json()

        listed = await client.get(f"{api_prefix}/orders")
        fetched = await client.get(f"{api_prefix}/orders/{created['id']}")

        assert listed.status_code == 200
        assert [o["id"] for o in listed.json()] == [created["id"]]
        assert fetched.status_code == 200
        assert fetched.json() == created

    async def test_get_unknown_order(self, client, api_prefix):
        response = await client.get(f"{api_prefix}/orders/{MISSING_ID}")

        assert response.status_code == 404

    async def test_update_order(self, client, api_prefix):
        created = (await post_order(client, api_prefix, mainDish="Rice", sideDishes=["Wadai"])).json()
        menu = {d["name"]: d["id"] for d in (await client.get(f"{api_prefix}/menu")).json()}

        response = await client.put(
            f"{api_prefix}/orders/{created['id']}",
            json={
                "mainDish": menu["Noodles"],
                "sideDishes": [menu["Fish curry"], menu["Fish curry"]],
                "dessert": menu["Pudding"],
            }
        )

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == created["id"]
        assert data["main_dish"]["name"] == "Noodles"
        assert [d["name"] for d in data["side_dishes"]] == ["Fish curry", "Fish curry"]
        assert data["dessert"]["name"] == "Pudding"
        assert data["created_at"] == created["created_at"]

    @pytest.mark.parametrize("order_id, expected_status", [
        ("not-a-uuid", 400),
        (MISSING_ID, 404),
    ])
    async def test_update_bad_order_id(self, client, api_prefix, order_id, expected_status):
        response = await client.put(
            f"{api_prefix}/orders/{order_id}",
            json={"mainDish": MISSING_ID, "sideDishes": [MISSING_ID]}
        )

        assert response.status_code == expected_status

    async def test_update_with_unknown_dish(self, client, api_prefix):
        created = (await post_order(client, api_prefix, mainDish="Rice", sideDishes=["Wadai"])).json()

        response = await client.put(
            f"{api_prefix}/orders/{created['id']}",
            json={"mainDish": created["main_dish"]["id"], "sideDishes": [MISSING_ID]}
        )

        assert response.status_code == 404

    async def test_update_with_mistyped_body(self, client, api_prefix):
        created = (await post_order(client, api_prefix, mainDish="Rice", sideDishes=["Wadai"])).json()

        response = await client.put(
            f"{api_prefix}/orders/{created['id']}",
            json={"mainDish": created["main_dish"]["id"], "sideDishes": created["side_dishes"][0]["id"]}
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "sideDishes must be a list"

    async def test_delete_order(self, client, api_prefix):
        created = (await post_order(client, api_prefix, mainDish="Rice", sideDishes=["Wadai"])).json()

        response = await client.delete(f"{api_prefix}/orders/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {"message": "Order deleted successfully"}
        assert (await client.get(f"{api_prefix}/orders/{created['id']}")).status_code == 404
        assert (await client.get(f"{api_prefix}/orders")).json() == []
        assert (await client.delete(f"{api_prefix}/orders/{created['id']}")).status_code == 404


class TestMenuEndpoints:
    """Catalog reads over /menu"""

    async def test_menu_by_category(self, client, api_prefix):
        response = await client.get(f"{api_prefix}/menu/main")

        assert response.status_code == 200
        assert [d["name"] for d in response.json()] == ["Noodles", "Rice", "Rotty"]
        assert {d["category"] for d in response.json()} == {"main"}

    async def test_menu_unknown_category(self, client, api_prefix):
        response = await client.get(f"{api_prefix}/menu/drinks")

        assert response.status_code == 200
        assert response.json() == []

    async def test_full_menu(self, client, api_prefix):
        response = await client.get(f"{api_prefix}/menu")

        assert response.status_code == 200
        assert len(response.json()) == 9


class TestReportEndpoints:
    """Statistics over /reports"""

    async def test_empty_reports(self, client, api_prefix):
        daily = await client.get(f"{api_prefix}/reports/daily-sales")
        main = await client.get(f"{api_prefix}/reports/famous-main-dish")
        side = await client.get(f"{api_prefix}/reports/famous-side-dish")
        pair = await client.get(f"{api_prefix}/reports/most-common-pair")

        assert daily.status_code == 200
        assert daily.json()["total"] == "0.00"
        assert daily.json()["order_count"] == 0
        assert main.status_code == 200
        assert main.json() == {"message": "No orders found"}
        assert side.status_code == 200
        assert side.json() == {"message": "No orders found"}
        assert pair.status_code == 200
        assert pair.json() == {"message": "No pairings found"}

    async def test_reports_with_orders(self, client, api_prefix):
        await post_order(client, api_prefix, mainDish="Rice", sideDishes=["Wadai", "Dhal curry"], dessert="Jelly")
        await post_order(client, api_prefix, mainDish="Rice", sideDishes=["Wadai"])

        daily = (await client.get(f"{api_prefix}/reports/daily-sales")).json()
        main = (await client.get(f"{api_prefix}/reports/famous-main-dish")).json()
        side = (await client.get(f"{api_prefix}/reports/famous-side-dish")).json()
        pair = (await client.get(f"{api_prefix}/reports/most-common-pair")).json()

        # (100 + 45 + 75 + 20) + (100 + 45)
        assert daily["total"] == "385.00"
        assert daily["order_count"] == 2
        assert main == {"name": "Rice", "count": 2}
        assert side == {"name": "Wadai", "count": 2}
        assert pair == {"main_dish": "Rice", "side_dish": "Wadai", "count": 2}
