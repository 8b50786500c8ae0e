import pytest

from app import create_app
from restaurateur.core.store import Store

MENU = {
    'name': "Dinner",
    'price': 25,
    'is_veg': "n",
    'cuisines': [
        {'name': "Italian", 'foods': [
            {'name': "Pizza", 'food_type': "veg", 'food_category': "maincourse", 'price': 9.5},
            {'name': "Pasta", 'food_type': "veg", 'food_category': "maincourse", 'price': 7.0},
        ]},
    ],
}

CUSTOMER = {'name': "Asha", 'age': 31, 'address': "12 Lake Road", 'phone': "555-0101"}


@pytest.fixture
def api_store():
    return Store()


@pytest.fixture
def client(api_store):
    return create_app(api_store).test_client()


@pytest.fixture
def business(client):
    client.post('/businesses', json={'name': "Luigi's", 'address': "1 Main St", 'phone': "555-0100"})
    client.put("/businesses/Luigi's/menu", json=MENU)
    return "Luigi's"


def test_health(client):
    response = client.get('/health')
    assert response.status_code == 200
    assert response.data == b'OK'


def test_create_and_get_business(client, api_store):
    response = client.post('/businesses', json={'name': "Luigi's", 'address': "1 Main St", 'phone': "555-0100"})
    assert response.status_code == 201
    assert api_store.get_business("Luigi's") is not None

    response = client.get("/businesses/Luigi's")
    assert response.get_json()['address'] == "1 Main St"
    assert response.get_json()['menu'] is None
    assert client.get('/businesses').get_json() == ["Luigi's"]


def test_business_name_required(client):
    assert client.post('/businesses', json={'address': "1 Main St"}).status_code == 400


def test_unknown_business_is_404(client):
    assert client.get('/businesses/Nowhere').status_code == 404
    assert client.put('/businesses/Nowhere/menu', json=MENU).status_code == 404
    assert client.get('/businesses/Nowhere/orders').status_code == 404
    assert client.delete('/businesses/Nowhere').status_code == 404


def test_menu_warnings_are_returned(client, business):
    response = client.put("/businesses/Luigi's/menu", json={'name': "Cheap", 'price': "abc"})

    assert response.status_code == 200
    assert response.get_json()['menu']['price'] == "0"
    assert response.get_json()['warnings'] == ["Invalid price 'abc', defaulting to 0"]


def test_place_and_list_order(client, business):
    response = client.post("/businesses/Luigi's/orders", json={
        'selections': [["Italian", "Pizza"], ["Italian", "Pasta"]],
        'customer': CUSTOMER,
        'payment_mode': "upi",
        'date': "2024-01-01",
    })

    assert response.status_code == 201
    order = response.get_json()['order']
    assert order['price'] == "16.5"
    assert order['payment_mode'] == "upi"
    assert len(order['foods']) == 2

    orders = client.get("/businesses/Luigi's/orders").get_json()
    assert [o['order_id'] for o in orders] == [order['order_id']]


def test_order_with_unknown_cuisine_is_rejected(client, business, api_store):
    response = client.post("/businesses/Luigi's/orders", json={
        'selections': [["Italain", "Pizza"]],
        'customer': CUSTOMER,
        'payment_mode': "cash",
    })

    assert response.status_code == 422
    assert response.get_json()['suggestion'] == "Italian"
    assert api_store.show_orders("Luigi's") == []


def test_order_without_menu_is_conflict(client):
    client.post('/businesses', json={'name': "Empty"})
    response = client.post('/businesses/Empty/orders', json={'selections': [], 'customer': CUSTOMER})
    assert response.status_code == 409


def test_remove_orders_by_date_and_id(client, business, api_store):
    payload = {'selections': [["Italian", "Pizza"]], 'customer': CUSTOMER, 'date': "2024-01-01"}
    first = client.post("/businesses/Luigi's/orders", json=payload).get_json()['order']
    client.post("/businesses/Luigi's/orders", json=payload)
    client.post("/businesses/Luigi's/orders", json=dict(payload, date="2024-01-02"))

    assert client.delete(f"/businesses/Luigi's/orders/{first['order_id']}").status_code == 204
    assert client.delete(f"/businesses/Luigi's/orders/{first['order_id']}").status_code == 404
    assert client.delete("/businesses/Luigi's/orders").status_code == 400
    assert client.delete("/businesses/Luigi's/orders?date=2024-01-01").status_code == 204

    assert [o.date for o in api_store.show_orders("Luigi's")] == ["2024-01-02"]


def test_remove_business(client, business):
    assert client.delete("/businesses/Luigi's").status_code == 204
    assert client.get("/businesses/Luigi's").status_code == 404


@pytest.mark.parametrize("selections", [
    [["Italian"]],
    [["Italian", "Pizza", "Pasta"]],
    ["Italian"],
    [{'cuisine': "Italian", 'food': "Pizza"}],
    "Italian",
    5,
])
def test_malformed_selections_are_bad_requests(client, business, api_store, selections):
    response = client.post("/businesses/Luigi's/orders", json={'selections': selections, 'customer': CUSTOMER})

    assert response.status_code == 400
    assert 'error' in response.get_json()
    assert api_store.show_orders("Luigi's") == []


def test_null_selections_give_empty_order(client, business):
    response = client.post("/businesses/Luigi's/orders", json={'selections': None, 'customer': CUSTOMER})

    assert response.status_code == 201
    assert response.get_json()['order']['foods'] == []
    assert response.get_json()['order']['price'] == "0"


def test_malformed_customer_is_bad_request(client, business):
    response = client.post("/businesses/Luigi's/orders", json={'selections': [], 'customer': ["Asha"]})
    assert response.status_code == 400


def test_order_body_must_be_object(client, business):
    response = client.post("/businesses/Luigi's/orders", json=[["Italian", "Pizza"]])
    assert response.status_code == 400


def test_json_age_with_float_value(client, business):
    response = client.post("/businesses/Luigi's/orders",
                           json={'selections': [], 'customer': dict(CUSTOMER, age=31.0)})

    assert response.get_json()['order']['customer']['age'] == 31
    assert response.get_json()['warnings'] == []


def test_null_cuisines_give_empty_menu(client, business):
    response = client.put("/businesses/Luigi's/menu", json={'name': "Bare", 'cuisines': None})

    assert response.status_code == 200
    assert response.get_json()['menu']['cuisines'] == []


@pytest.mark.parametrize("menu", [
    {'name': "Bad", 'cuisines': ["Italian"]},
    {'name': "Bad", 'cuisines': [{'name': "Italian", 'foods': ["Pizza"]}]},
    ["Italian"],
])
def test_malformed_menu_is_bad_request(client, business, api_store, menu):
    response = client.put("/businesses/Luigi's/menu", json=menu)

    assert response.status_code == 400
    assert 'error' in response.get_json()
    assert api_store.get_business("Luigi's").menu.name == "Dinner"
