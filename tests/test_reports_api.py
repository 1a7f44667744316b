from datetime import date

import pytest

from pathlab.services import report_writer

pytestmark = pytest.mark.anyio


def _report(patient_id, doctor_id, tests, test_date=None, status="Pending"):
    return {
        "patient_id": patient_id,
        "doctor_id": doctor_id,
        "test_date": (test_date or date.today()).isoformat(),
        "overall_comments": "Sample received at 9am",
        "status": status,
        "tests_conducted": tests,
    }


async def _create_report(client, payload):
    r = await client.post("/api/reports", json=payload)
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["success"] is True
    assert body["message"] == "Report added successfully"
    return body["reportId"]


async def test_create_then_detail(client, catalog, patient_id, doctor_id):
    hb, plt = catalog["component_ids"]
    report_id = await _create_report(client, _report(patient_id, doctor_id, [
        {"test_id": catalog["cbc_id"], "component_id": hb, "result": "13.5"},
        {"test_id": catalog["cbc_id"], "component_id": plt, "result": "2.5", "status": "Completed"},
    ]))

    r = await client.get(f"/api/reports/detail/{report_id}")
    assert r.status_code == 200, r.text
    items = r.json()["reportItems"]
    assert len(items) == 2
    assert {i["report_id"] for i in items} == {report_id}
    first = items[0]
    assert first["patients_name"] == "Jane Doe"
    assert first["doctor_name"] == "Dr. Rao"
    assert first["test_name"] == "Complete Blood Count"
    assert first["component_name"] == "Haemoglobin"
    assert first["method"] == "N/A"
    assert first["report_item_comments"] == "Sample received at 9am"
    assert first["status"] == "Pending"
    assert items[1]["status"] == "Completed"


async def test_detail_without_component(client, catalog, patient_id, doctor_id):
    report_id = await _create_report(client, _report(patient_id, doctor_id, [
        {"test_id": catalog["esr_id"], "result": "12"},
    ]))

    items = (await client.get(f"/api/reports/detail/{report_id}")).json()["reportItems"]
    assert len(items) == 1
    assert items[0]["component_id"] is None
    assert items[0]["component_name"] is None
    assert items[0]["test_name"] == "ESR"


async def test_detail_unknown_report_is_empty(client):
    r = await client.get("/api/reports/detail/REP-NOPE00")
    assert r.status_code == 200
    assert r.json() == {"success": True, "reportItems": []}


async def test_replace_report(client, catalog, patient_id, doctor_id):
    hb, plt = catalog["component_ids"]
    report_id = await _create_report(client, _report(patient_id, doctor_id, [
        {"test_id": catalog["cbc_id"], "component_id": hb, "result": "13.5"},
        {"test_id": catalog["cbc_id"], "component_id": plt, "result": "2.5"},
    ]))

    r = await client.put(
        f"/api/reports/{report_id}",
        json=_report(patient_id, doctor_id, [{"test_id": catalog["esr_id"], "result": "8"}], status="Completed"),
    )
    assert r.status_code == 200, r.text
    assert r.json()["message"] == f"Report {report_id} updated successfully"
    assert r.json()["reportId"] == report_id

    items = (await client.get(f"/api/reports/detail/{report_id}")).json()["reportItems"]
    assert len(items) == 1
    assert items[0]["test_name"] == "ESR"
    assert items[0]["status"] == "Completed"


async def test_replace_with_bad_test_keeps_report(client, catalog, patient_id, doctor_id):
    report_id = await _create_report(client, _report(patient_id, doctor_id, [
        {"test_id": catalog["esr_id"], "result": "12"},
    ]))

    r = await client.put(
        f"/api/reports/{report_id}",
        json=_report(patient_id, doctor_id, [{"test_id": 424242, "result": "1"}]),
    )
    assert r.status_code == 500, r.text
    assert r.json()["success"] is False

    items = (await client.get(f"/api/reports/detail/{report_id}")).json()["reportItems"]
    assert [i["result"] for i in items] == ["12"]


async def test_create_with_unknown_patient_fails_atomically(client, catalog, doctor_id):
    r = await client.post("/api/reports", json=_report("PAT-ZZZZZZ", doctor_id, [
        {"test_id": catalog["esr_id"], "result": "12"},
    ]))
    assert r.status_code == 500, r.text
    assert r.json()["success"] is False

    assert (await client.get("/api/reports")).json()["reports"] == []


async def test_delete_report(client, catalog, patient_id, doctor_id):
    report_id = await _create_report(client, _report(patient_id, doctor_id, [
        {"test_id": catalog["esr_id"], "result": "12"},
    ]))

    r = await client.delete(f"/api/reports/{report_id}")
    assert r.status_code == 200, r.text
    assert r.json() == {"success": True, "message": "Report deleted successfully"}

    r = await client.delete(f"/api/reports/{report_id}")
    assert r.status_code == 404
    assert r.json() == {"success": False, "message": "Report not found or already deleted"}

    reports = (await client.get("/api/reports")).json()["reports"]
    assert report_id not in [rep["report_id"] for rep in reports]


async def test_list_aggregates_items(client, catalog, patient_id, doctor_id):
    hb, plt = catalog["component_ids"]
    report_id = await _create_report(client, _report(patient_id, doctor_id, [
        {"test_id": catalog["cbc_id"], "component_id": hb, "status": "Completed"},
        {"test_id": catalog["cbc_id"], "component_id": plt, "status": "Completed"},
        {"test_id": catalog["esr_id"], "status": "Pending"},
    ]))

    r = await client.get("/api/reports")
    assert r.status_code == 200
    reports = r.json()["reports"]
    assert len(reports) == 1
    report = reports[0]
    assert report["report_id"] == report_id
    assert report["patients_name"] == "Jane Doe"
    assert report["tests"] == "Complete Blood Count, ESR"
    assert report["status"] == "Pending"


async def test_list_orders_newest_first(client, catalog, patient_id, doctor_id):
    older = await _create_report(client, _report(
        patient_id, doctor_id, [{"test_id": catalog["esr_id"]}], test_date=date(2024, 1, 10)
    ))
    newer = await _create_report(client, _report(
        patient_id, doctor_id, [{"test_id": catalog["esr_id"]}], test_date=date(2024, 3, 5)
    ))

    reports = (await client.get("/api/reports")).json()["reports"]
    assert [rep["report_id"] for rep in reports] == [newer, older]
    assert reports[0]["test_date"] == "2024-03-05"


async def test_today_listing(client, catalog, patient_id, doctor_id):
    today_id = await _create_report(client, _report(patient_id, doctor_id, [{"test_id": catalog["esr_id"]}]))
    await _create_report(client, _report(
        patient_id, doctor_id, [{"test_id": catalog["esr_id"]}], test_date=date(2020, 1, 1)
    ))

    r = await client.get("/api/reports/today")
    assert r.status_code == 200
    assert [rep["report_id"] for rep in r.json()["reports"]] == [today_id]


async def test_create_missing_fields(client, catalog, patient_id):
    payload = _report(patient_id, "", [{"test_id": catalog["esr_id"]}])
    r = await client.post("/api/reports", json=payload)
    assert r.status_code == 400
    body = r.json()
    assert body["success"] is False
    assert "doctor_id" in body["message"]


async def test_create_without_tests(client, patient_id, doctor_id):
    r = await client.post("/api/reports", json=_report(patient_id, doctor_id, []))
    assert r.status_code == 400
    assert r.json()["success"] is False


async def test_patient_with_report_cannot_be_deleted(client, catalog, patient_id, doctor_id):
    await _create_report(client, _report(patient_id, doctor_id, [{"test_id": catalog["esr_id"]}]))

    r = await client.delete(f"/api/patients/{patient_id}")
    assert r.status_code == 409
    assert r.json() == {"success": False, "message": "Patient has related reports and cannot be deleted"}


async def test_same_day_reports_order_by_id_desc(client, catalog, patient_id, doctor_id, monkeypatch):
    ids = iter(["REP-AAAAAA", "REP-CCCCCC", "REP-BBBBBB"])
    monkeypatch.setattr(report_writer, "generate_identifier", lambda kind: next(ids))
    same_day = date(2024, 2, 14)

    for _ in range(3):
        await _create_report(client, _report(
            patient_id, doctor_id, [{"test_id": catalog["esr_id"]}], test_date=same_day
        ))

    reports = (await client.get("/api/reports")).json()["reports"]
    assert [rep["report_id"] for rep in reports] == ["REP-CCCCCC", "REP-BBBBBB", "REP-AAAAAA"]


async def test_replaced_report_listed_once_with_new_tests(client, catalog, patient_id, doctor_id):
    hb, _ = catalog["component_ids"]
    report_id = await _create_report(client, _report(patient_id, doctor_id, [
        {"test_id": catalog["cbc_id"], "component_id": hb},
    ]))

    replacement = _report(patient_id, doctor_id, [
        {"test_id": catalog["esr_id"], "result": "8"},
        {"test_id": catalog["cbc_id"], "component_id": hb, "result": "13.1"},
    ])
    for _ in range(2):
        r = await client.put(f"/api/reports/{report_id}", json=replacement)
        assert r.status_code == 200, r.text

    reports = (await client.get("/api/reports")).json()["reports"]
    assert len(reports) == 1
    assert reports[0]["report_id"] == report_id
    assert reports[0]["tests"] == "ESR, Complete Blood Count"

    items = (await client.get(f"/api/reports/detail/{report_id}")).json()["reportItems"]
    assert [i["result"] for i in items] == ["8", "13.1"]
