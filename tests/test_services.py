import json

import httpx
import pytest

from pickup_mtaani.errors import ConflictError, MissingDataError, NotFoundError, PickupMtaaniError
from pickup_mtaani.schemas import (
    AgentDeliveryChargeQuery,
    AgentQuery,
    CreateAgentPackageRequest,
    CreateDoorstepPackageRequest,
    CreateExpressPackageRequest,
    DoorstepDeliveryChargeQuery,
    ExpressDirectionsRequest,
    LocationsQuery,
    PackageQuery,
    PaginationParams,
    PaymentPackage,
    PaymentSTKRequest,
    RegisterWebhookRequest,
    UpdateBusinessRequest,
    UpdateExpressPackageRequest,
    VerifyPaymentRequest,
)


def _json(body, status_code: int = 200):
    return lambda request: httpx.Response(status_code, json=body)


def _agent_package(pid: int = 11, state: str = "request") -> dict:
    return {
        "id": pid,
        "createdAt": "2025-01-10T08:00:00Z",
        "customerName": "John Doe",
        "customerPhoneNumber": "0712345678",
        "packageName": "Electronics",
        "packageValue": 5000,
        "receipt_no": f"PM-{pid}",
        "state": state,
        "delivery_fee": 150,
        "payment_option": "vendor",
        "trackId": f"TRK{pid}",
        "businessId_id": 505,
        "type": "agent",
        "senderAgentID_id": 362,
        "receieverAgentID_id": 454,
    }


def test_business_get_unwraps_envelope(make_client):
    body = {"success": True, "data": {"id": 505, "name": "Duka", "phone_number": "0712345678", "wallet_balance": 1200}}
    client, handler = make_client(_json(body))

    business = client.business.get()

    assert business.id == 505
    assert business.wallet_balance == 1200
    assert handler.last.url.path.endswith("/business")


def test_business_get_without_data_raises_missing_data(make_client):
    client, _ = make_client(_json({"success": True, "message": "ok"}))

    with pytest.raises(MissingDataError, match="No business data returned") as excinfo:
        client.business.get()

    assert not isinstance(excinfo.value, PickupMtaaniError)


def test_business_get_with_empty_data_object_raises_missing_data(make_client):
    client, _ = make_client(_json({"success": True, "data": {}}))

    with pytest.raises(MissingDataError, match="No business data returned"):
        client.business.get()


def test_business_delete_after_redirect_is_an_error(make_client):
    moved = {"Location": "https://api.moved.test/api/v1/business/remove"}
    client, _ = make_client(lambda request: httpx.Response(301, headers=moved))

    with pytest.raises(PickupMtaaniError) as excinfo:
        client.business.delete()

    assert excinfo.value.status_code == 301


def test_business_update_sends_only_set_fields(make_client):
    client, handler = make_client(_json({"data": {"id": 505, "name": "New Duka"}}))

    business = client.business.update(UpdateBusinessRequest(name="New Duka"))

    assert business.name == "New Duka"
    assert handler.last.method == "PUT"
    assert json.loads(handler.last.read()) == {"name": "New Duka"}


def test_business_delete_defaults_message(make_client):
    client, handler = make_client(lambda request: httpx.Response(200, content=b""))

    assert client.business.delete() == "Business deleted successfully"
    assert handler.last.method == "DELETE"
    assert handler.last.url.path.endswith("/business/remove")


def test_business_delete_prefers_server_message(make_client):
    client, _ = make_client(_json({"message": "Business removed"}))

    assert client.business.delete() == "Business removed"


def test_categories_keep_pagination_fields(make_client):
    body = {"totalCount": 42, "pageNumber": 1, "pageSize": 2, "data": [{"id": 1, "name": "Fashion"}, {"id": 2, "name": "Food"}]}
    client, handler = make_client(_json(body))

    page = client.business.get_categories(PaginationParams(page_number=1, page_size=2))

    assert page.total_count == 42
    assert page.page_number == 1
    assert page.page_size == 2
    assert [category.name for category in page.data] == ["Fashion", "Food"]
    assert dict(handler.last.url.params) == {"pageNumber": "1", "pageSize": "2"}


def test_lookups_return_empty_list_without_data(make_client):
    client, _ = make_client(_json({"success": True}))

    assert client.locations.get_zones() == []
    assert client.locations.get_areas() == []
    assert client.agents.list() == []
    assert client.express_deliveries.get_delivery_modes() == []


def test_locations_filters_use_wire_names(make_client):
    client, handler = make_client(_json({"data": [{"id": 245, "name": "Kikuyu", "zone_id": 3}]}))

    locations = client.locations.get_locations(LocationsQuery(area_id=7, search_key="kik"))

    assert locations[0].zone_id == 3
    assert dict(handler.last.url.params) == {"areaId": "7", "searchKey": "kik"}


def test_agents_filter_by_location(make_client):
    client, handler = make_client(_json({"data": [{"id": 362, "business_name": "Kikuyu Stage Agent"}]}))

    agents = client.agents.list(AgentQuery(location_id=245))

    assert agents[0].business_name == "Kikuyu Stage Agent"
    assert handler.last.url.params["locationId"] == "245"


def test_delivery_charge_quotes(make_client):
    client, handler = make_client(_json({"data": {"price": 150}}))

    fee = client.delivery_charge.get_agent_package_fee(
        AgentDeliveryChargeQuery(sender_agent_id=362, receiver_agent_id=454)
    )
    assert fee.price == 150
    assert dict(handler.last.url.params) == {"senderAgentID": "362", "receiverAgentID": "454"}

    client.delivery_charge.get_doorstep_package_fee(
        DoorstepDeliveryChargeQuery(sender_agent_id=517, doorstep_destination_id=541)
    )
    assert handler.last.url.path.endswith("/delivery-charge/doorstep-package")
    assert handler.last.url.params["doorstepDestinationID"] == "541"


def test_agent_package_create_posts_body_with_business_id(make_client):
    client, handler = make_client(_json({"data": _agent_package()}))

    package = client.agent_packages.create(
        505,
        CreateAgentPackageRequest(
            sender_agent_id=362,
            receiver_agent_id=454,
            customer_name="John Doe",
            customer_phone_number="0712345678",
            package_name="Electronics",
            package_value=5000,
            on_delivery_balance=500,
        ),
    )

    assert package.receiver_agent_id == 454
    assert package.track_id == "TRK11"
    request = handler.last
    assert request.method == "POST"
    assert request.url.params["b_id"] == "505"
    assert json.loads(request.read()) == {
        "senderAgentId": 362,
        "receiverAgentId": 454,
        "packageValue": 5000.0,
        "customerName": "John Doe",
        "packageName": "Electronics",
        "customerPhoneNumber": "0712345678",
        "paymentOption": "vendor",
        "on_delivery_balance": 500.0,
    }


def test_agent_package_get_without_data(make_client):
    client, _ = make_client(_json({"data": None}))

    with pytest.raises(MissingDataError, match="No package data returned"):
        client.agent_packages.get(11, 505)


def test_agent_package_list_merges_filters(make_client):
    body = {"totalCount": 42, "data": [_agent_package(1, "in_transit"), _agent_package(2, "rider_assigned")]}
    client, handler = make_client(_json(body))

    page = client.agent_packages.list(505, PackageQuery(state="in_transit", page_number=0, page_size=10))

    assert page.total_count == 42
    assert page.page_number is None
    assert [package.state for package in page.data] == ["in_transit", "rider_assigned"]
    assert dict(handler.last.url.params) == {"b_id": "505", "state": "in_transit", "pageNumber": "0", "pageSize": "10"}


def test_agent_package_update_and_delete(make_client):
    client, handler = make_client(_json({"data": _agent_package(), "message": "Package removed"}))

    client.agent_packages.update(11, {"packageName": "Books"})
    assert handler.last.url.path.endswith("/packages/agent-update")
    assert handler.last.url.params["id"] == "11"

    assert client.agent_packages.delete(11) == "Package removed"
    assert handler.last.url.path.endswith("/packages/agent-package")


def test_unpaid_packages_are_id_type_pairs(make_client):
    client, handler = make_client(_json({"data": [{"id": 1, "type": "agent"}, {"id": 2, "type": "doorstep"}]}))

    unpaid = client.doorstep_packages.get_unpaid(505)

    assert [(item.id, item.type) for item in unpaid] == [(1, "agent"), (2, "doorstep")]
    assert handler.last.url.path.endswith("/packages/my-unpaid-packages")


def test_doorstep_package_lifecycle(make_client):
    package = {"id": 21, "type": "doorstep", "agent_id": 517, "doorstepDestinationId": 541, "lat": -1.2921, "lng": 36.8219}
    client, handler = make_client(_json({"data": package}))

    created = client.doorstep_packages.create(
        505,
        CreateDoorstepPackageRequest(
            sender_agent_id=517,
            customer_name="Jane Doe",
            customer_phone_number="0723456789",
            package_name="Groceries",
            package_value=3000,
            doorstep_destination_id=541,
            location_description="Near the supermarket",
            lat=-1.2921,
            lng=36.8219,
        ),
    )
    assert created.doorstep_destination_id == 541
    assert json.loads(handler.last.read())["senderAgentID_id"] == 517

    client.doorstep_packages.get(21, 505)
    assert dict(handler.last.url.params) == {"id": "21", "b_id": "505"}

    client.doorstep_packages.update(21, {"locationDescription": "Gate B"})
    assert handler.last.url.path.endswith("/packages/doorstep-update")


def test_doorstep_delete_default_message(make_client):
    client, handler = make_client(_json({"success": True}))

    assert client.doorstep_packages.delete(21) == "Package deleted successfully"
    assert handler.last.url.path.endswith("/packages/doorstep-package")


def test_express_directions_quote(make_client):
    client, handler = make_client(_json({"data": {"distance": 4.2, "duration": 900, "price": 560, "gross_price": 600}}))

    directions = client.express_deliveries.get_directions(
        750,
        ExpressDirectionsRequest(coordinates=[(36.81443, -1.27365), (36.84224, -1.29124)], rider_type_id=2),
    )

    assert directions.price == 560
    assert json.loads(handler.last.read()) == {
        "coordinates": [[36.81443, -1.27365], [36.84224, -1.29124]],
        "rider_type_id": 2,
    }


def test_express_create_serializes_from_field(make_client):
    client, handler = make_client(_json({"data": {"id": 31, "type": "express", "from": "Westlands", "to": "CBD"}}))

    express = client.express_deliveries.create(
        750,
        CreateExpressPackageRequest(
            customer_name="Alice Johnson",
            customer_phone_number="0745678901",
            package_value=2000,
            package_name="Electronics",
            departure=(36.8219, -1.2921),
            destination=(36.8422, -1.2912),
            exact_location="Burma Market",
            payment_option="vendor",
            from_="Westlands",
            to="CBD",
        ),
    )

    assert express.from_ == "Westlands"
    body = json.loads(handler.last.read())
    assert body["from"] == "Westlands"
    assert body["departure"] == [36.8219, -1.2921]


def test_express_get_and_update(make_client):
    client, handler = make_client(_json({"data": {"id": 31, "payment_status": "paid"}}))

    assert client.express_deliveries.get(31).payment_status == "paid"
    assert dict(handler.last.url.params) == {"id": "31"}

    client.express_deliveries.update(31, 750, UpdateExpressPackageRequest(rider_type_id=1))
    assert handler.last.method == "PUT"
    assert dict(handler.last.url.params) == {"id": "31", "b_id": "750"}


def test_find_rider_is_a_put(make_client):
    riders = [{"rider_id": 4, "loc": [36.8, -1.29], "name": "Brian Rider", "email": "b@example.com", "phone_number": "0711111111"}]
    client, handler = make_client(_json({"data": riders}))

    result = client.express_deliveries.find_rider(31)

    assert result[0].name == "Brian Rider"
    assert handler.last.method == "PUT"
    assert handler.last.url.path.endswith("/packages/express/find-rider")


def test_service_errors_propagate_unchanged(make_client):
    client, _ = make_client(_json({"message": "Package not awaiting a rider"}, 409))

    with pytest.raises(ConflictError, match="Package not awaiting a rider"):
        client.express_deliveries.find_rider(31)


def test_not_found_on_get_is_not_missing_data(make_client):
    client, _ = make_client(_json({"message": "Package not found"}, 404))

    with pytest.raises(NotFoundError):
        client.agent_packages.get(99, 505)


def test_stk_push_and_verification(make_client):
    client, handler = make_client(_json({"success": True, "message": "STK push sent"}))
    packages = [PaymentPackage(id=1, type="agent"), PaymentPackage(id=2, type="doorstep")]

    response = client.payments.pay_with_stk(505, PaymentSTKRequest(packages=packages, phone="0712345678"))

    assert response.success is True
    assert response.message == "STK push sent"
    assert handler.last.url.params["b_id"] == "505"
    assert json.loads(handler.last.read()) == {
        "packages": [{"id": 1, "type": "agent"}, {"id": 2, "type": "doorstep"}],
        "phone": "0712345678",
    }

    client.payments.verify_payment(505, VerifyPaymentRequest(packages=packages, transcode="QGR12345ABC"))
    assert json.loads(handler.last.read())["transcode"] == "QGR12345ABC"
    assert len(handler.requests) == 2


def test_webhook_registration(make_client):
    client, handler = make_client(_json({}))

    message = client.webhooks.register(RegisterWebhookRequest(webhook_url="https://example.com/hooks"))

    assert message == "Webhook registered successfully"
    assert json.loads(handler.last.read()) == {"webhook_url": "https://example.com/hooks"}
