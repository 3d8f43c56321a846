"""Integration tests for the employee API."""
import logging

import pytest
from httpx import AsyncClient

from conftest import employee_payload


async def _create(client: AsyncClient, **overrides: object) -> str:
    """Create an employee and return its stored id."""

    response = await client.post("/createemployee", json=employee_payload(**overrides))
    assert response.status_code == 200
    email = overrides.get("email", "ann@x.com")
    listing = (await client.get("/employeelist")).json()
    return next(record["_id"] for record in listing if record["f_Email"] == email)


@pytest.mark.asyncio
async def test_employee_lifecycle(client: AsyncClient) -> None:
    """Create, list, fetch, edit and delete one employee."""

    payload = employee_payload()
    create_response = await client.post("/createemployee", json=payload)
    assert create_response.status_code == 200
    assert create_response.json() == {"message": "Form submitted successfully", "data": payload}

    list_response = await client.get("/employeelist")
    assert list_response.status_code == 200
    employees = list_response.json()
    assert len(employees) == 1
    stored = employees[0]
    assert stored["f_Email"] == "ann@x.com"
    assert stored["f_Name"] == "Ann Lee"
    assert stored["f_MobileNo"] == "1234567890"
    assert stored["f_Image"] == "http://x.com/p.jpg"
    assert stored["f_CreateDate"] == "2024-01-01"
    employee_id = stored["_id"]

    get_response = await client.get(f"/{employee_id}/edit")
    assert get_response.status_code == 200
    assert get_response.json() == stored

    update_response = await client.put(
        f"/employeeedit/{employee_id}", json=employee_payload(designation="Lead")
    )
    assert update_response.status_code == 200
    body = update_response.json()
    assert body["message"] == "Form submitted successfully"
    assert body["data"]["_id"] == employee_id
    assert body["data"]["f_Designation"] == "Lead"

    delete_response = await client.request("DELETE", "/deleteemployee", json={"_id": employee_id})
    assert delete_response.status_code == 200
    assert delete_response.json() == {"success": True, "message": "Employee deleted successfully"}

    missing = await client.get(f"/{employee_id}/edit")
    assert missing.status_code == 404
    assert missing.json() == {"message": "Employee not found"}
    assert (await client.get("/employeelist")).json() == []


@pytest.mark.asyncio
async def test_list_is_empty_without_employees(client: AsyncClient) -> None:
    response = await client.get("/employeelist")
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_duplicate_email_rejected_on_create(client: AsyncClient) -> None:
    await _create(client)

    response = await client.post("/createemployee", json=employee_payload(name="Bob Stone"))
    assert response.status_code == 400
    assert response.json() == {"message": "Email already exists"}
    assert len((await client.get("/employeelist")).json()) == 1


@pytest.mark.asyncio
async def test_update_keeps_own_email(client: AsyncClient) -> None:
    employee_id = await _create(client)

    response = await client.put(
        f"/employeeedit/{employee_id}", json=employee_payload(mobileNo="0987654321")
    )
    assert response.status_code == 200
    assert response.json()["data"]["f_Email"] == "ann@x.com"
    assert response.json()["data"]["f_MobileNo"] == "0987654321"


@pytest.mark.asyncio
async def test_update_rejects_email_of_another_employee(client: AsyncClient) -> None:
    await _create(client)
    other_id = await _create(client, email="bob@x.com", name="Bob Stone")

    response = await client.put(f"/employeeedit/{other_id}", json=employee_payload(name="Bob Stone"))
    assert response.status_code == 400
    assert response.json() == {"message": "Email already exists"}

    unchanged = (await client.get(f"/{other_id}/edit")).json()
    assert unchanged["f_Email"] == "bob@x.com"


@pytest.mark.asyncio
async def test_update_replaces_every_field(client: AsyncClient) -> None:
    employee_id = await _create(client)
    replacement = employee_payload(
        name="Ann Marie Lee",
        email="annmarie@x.com",
        mobileNo="5555555555",
        designation="Manager",
        gender="Female",
        course="MCA",
        pic="https://cdn.x.com/ann.png",
        createDate="2024-02-02",
    )

    response = await client.put(f"/employeeedit/{employee_id}", json=replacement)
    assert response.status_code == 200
    assert response.json()["data"] == {
        "_id": employee_id,
        "f_Name": "Ann Marie Lee",
        "f_Email": "annmarie@x.com",
        "f_MobileNo": "5555555555",
        "f_Designation": "Manager",
        "f_Gender": "Female",
        "f_Course": "MCA",
        "f_Image": "https://cdn.x.com/ann.png",
        "f_CreateDate": "2024-02-02",
    }


@pytest.mark.asyncio
async def test_update_unknown_employee_returns_404(client: AsyncClient) -> None:
    response = await client.put("/employeeedit/does-not-exist", json=employee_payload())
    assert response.status_code == 404
    assert response.json() == {"message": "Employee not found"}


@pytest.mark.asyncio
async def test_update_validates_before_lookup(client: AsyncClient) -> None:
    response = await client.put("/employeeedit/does-not-exist", json=employee_payload(course="PHD"))
    assert response.status_code == 400
    assert response.json() == {"message": "Course must be either 'MCA', 'BCA', or 'BSC'."}


@pytest.mark.asyncio
async def test_get_unknown_employee_returns_404(client: AsyncClient) -> None:
    response = await client.get("/0123456789abcdef/edit")
    assert response.status_code == 404
    assert response.json() == {"message": "Employee not found"}


@pytest.mark.asyncio
async def test_delete_unknown_employee_returns_404(client: AsyncClient) -> None:
    await _create(client)

    response = await client.request("DELETE", "/deleteemployee", json={"_id": "nope"})
    assert response.status_code == 404
    assert response.json() == {"message": "Employee not found"}
    assert len((await client.get("/employeelist")).json()) == 1


@pytest.mark.asyncio
async def test_delete_without_id_returns_404(client: AsyncClient) -> None:
    response = await client.request("DELETE", "/deleteemployee", json={})
    assert response.status_code == 404


@pytest.mark.asyncio
@pytest.mark.parametrize("employee_id", [{"$ne": None}, 1.5, 7, ["abc"]])
async def test_delete_with_non_string_id_returns_404(client: AsyncClient, employee_id, caplog) -> None:
    await _create(client)

    with caplog.at_level(logging.INFO):
        response = await client.request("DELETE", "/deleteemployee", json={"_id": employee_id})
    assert response.status_code == 404
    assert response.json() == {"message": "Employee not found"}
    assert "Employee not found" in caplog.text
    assert len((await client.get("/employeelist")).json()) == 1


@pytest.mark.asyncio
async def test_not_found_logs_the_requested_id(client: AsyncClient, caplog) -> None:
    with caplog.at_level(logging.INFO):
        response = await client.get("/0123abcd/edit")
    assert response.status_code == 404
    assert "Employee not found: 0123abcd" in caplog.text


@pytest.mark.asyncio
async def test_create_accepts_reserved_test_domain(client: AsyncClient) -> None:
    response = await client.post("/createemployee", json=employee_payload(email="ann@corp.test"))
    assert response.status_code == 200
    assert (await client.get("/employeelist")).json()[0]["f_Email"] == "ann@corp.test"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"name": "Al"}, "Name should be at least 3 characters."),
        ({"name": "A" * 31}, "Name should not exceed 30 characters."),
        ({"name": ""}, "Name cannot be empty."),
        ({"name": 42}, "Name should be a string."),
        ({"email": "not-an-email"}, "Please enter a valid email address."),
        ({"mobileNo": "12345"}, "Mobile number must be a 10-digit number."),
        ({"mobileNo": "12345abcde"}, "Mobile number must be a 10-digit number."),
        ({"designation": ""}, "Enter a valid Designation"),
        ({"gender": "Other"}, "Gender must be either 'Male' or 'Female'."),
        ({"course": "MBA"}, "Course must be either 'MCA', 'BCA', or 'BSC'."),
        ({"pic": ""}, "Upload the Image"),
        ({"pic": "just a file name"}, "Please provide a valid URL for the picture."),
        ({"pic": " http://x.com/p.jpg"}, "Please provide a valid URL for the picture."),
        ({"pic": "http://x.com/a b.jpg"}, "Please provide a valid URL for the picture."),
        ({"pic": "http://x.com/p.jpg\n"}, "Please provide a valid URL for the picture."),
        ({"salary": 1000}, '"salary" is not allowed'),
    ],
)
async def test_create_rejects_invalid_fields(client: AsyncClient, overrides: dict, message: str) -> None:
    response = await client.post("/createemployee", json=employee_payload(**overrides))
    assert response.status_code == 400
    assert response.json() == {"message": message}
    assert (await client.get("/employeelist")).json() == []


@pytest.mark.asyncio
async def test_create_reports_missing_field(client: AsyncClient) -> None:
    payload = employee_payload()
    del payload["mobileNo"]

    response = await client.post("/createemployee", json=payload)
    assert response.status_code == 400
    assert response.json() == {"message": "Mobile number is required."}


@pytest.mark.asyncio
async def test_create_reports_first_error_only(client: AsyncClient) -> None:
    response = await client.post(
        "/createemployee", json=employee_payload(email="bad", mobileNo="1", gender="x")
    )
    assert response.status_code == 400
    assert response.json() == {"message": "Please enter a valid email address."}


@pytest.mark.asyncio
async def test_create_rejects_non_object_body(client: AsyncClient) -> None:
    response = await client.post("/createemployee", json=["not", "an", "object"])
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid input"
