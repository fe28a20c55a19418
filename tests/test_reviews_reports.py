from conftest import customer_payload, worker_payload

VISIT = "2025-01-01T10:00:00Z"


def completed_appointment(customer_client, worker_client, worker_id) -> int:
    appt_id = customer_client.post(
        "/api/appointments",
        json={"workerId": worker_id, "issueDescription": "Fix tap", "address": "1 Main St"},
    ).json()["id"]
    url = f"/api/appointments/{appt_id}/status"
    worker_client.patch(url, json={"status": "accepted", "visitTime": VISIT})
    worker_client.patch(url, json={"status": "completed"})
    return appt_id


class TestReviews:
    def test_average_of_several_reviews(self, client, register):
        bob_c, bob = register(worker_payload("bob"))
        for name, rating in (("ann", 5), ("ben", 3), ("cat", 4)):
            cc, _ = register(customer_payload(name))
            appt_id = completed_appointment(cc, bob_c, bob["id"])
            response = cc.post(
                "/api/reviews",
                json={"appointmentId": appt_id, "rating": rating, "comment": "ok"},
            )
            assert response.status_code == 201

        profile = client.get(f"/api/workers/{bob['id']}").json()
        assert profile["averageRating"] == 4.0

        reviews = client.get(f"/api/workers/{bob['id']}/reviews").json()
        assert len(reviews) == 3
        assert {r["rating"] for r in reviews} == {3, 4, 5}

    def test_review_takes_parties_from_appointment(self, alice, bob):
        c, customer = alice
        wc, worker = bob
        appt_id = completed_appointment(c, wc, worker["id"])
        data = c.post("/api/reviews", json={"appointmentId": appt_id, "rating": 4}).json()
        assert data["workerId"] == worker["id"]
        assert data["userId"] == customer["id"]
        assert data["comment"] is None

    def test_rating_out_of_range_rejected(self, alice, bob):
        c, _ = alice
        wc, worker = bob
        appt_id = completed_appointment(c, wc, worker["id"])
        for rating in (0, 6):
            response = c.post("/api/reviews", json={"appointmentId": appt_id, "rating": rating})
            assert response.status_code == 400
            assert response.json()["field"] == "rating"

    def test_only_completed_appointments(self, alice, bob):
        c, _ = alice
        _, worker = bob
        appt_id = c.post(
            "/api/appointments",
            json={"workerId": worker["id"], "issueDescription": "x", "address": "y"},
        ).json()["id"]
        response = c.post("/api/reviews", json={"appointmentId": appt_id, "rating": 5})
        assert response.status_code == 400

    def test_one_review_per_appointment(self, alice, bob):
        c, _ = alice
        wc, worker = bob
        appt_id = completed_appointment(c, wc, worker["id"])
        assert c.post("/api/reviews", json={"appointmentId": appt_id, "rating": 5}).status_code == 201
        again = c.post("/api/reviews", json={"appointmentId": appt_id, "rating": 1})
        assert again.status_code == 400
        assert again.json()["message"] == "This appointment has already been reviewed"

    def test_cannot_review_someone_elses_appointment(self, alice, bob, register):
        c, _ = alice
        wc, worker = bob
        appt_id = completed_appointment(c, wc, worker["id"])
        other_c, _ = register(customer_payload("carol"))
        response = other_c.post("/api/reviews", json={"appointmentId": appt_id, "rating": 1})
        assert response.status_code == 403

    def test_unknown_appointment_is_404(self, alice):
        c, _ = alice
        response = c.post("/api/reviews", json={"appointmentId": 9999, "rating": 3})
        assert response.status_code == 404


class TestReports:
    def test_customer_reports_worker(self, alice, bob):
        c, customer = alice
        _, worker = bob
        response = c.post(
            "/api/reports",
            json={"reportedWorkerId": worker["id"], "reason": "No-show"},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "pending"
        assert data["reporterId"] == customer["id"]

    def test_reason_required(self, alice, bob):
        c, _ = alice
        _, worker = bob
        response = c.post("/api/reports", json={"reportedWorkerId": worker["id"], "reason": " "})
        assert response.status_code == 400
        assert response.json()["field"] == "reason"

    def test_unknown_worker_is_404(self, alice):
        c, _ = alice
        response = c.post("/api/reports", json={"reportedWorkerId": 9999, "reason": "Rude"})
        assert response.status_code == 404

    def test_worker_cannot_file(self, bob, register):
        wc, _ = bob
        _, other = register(worker_payload("dan"))
        response = wc.post("/api/reports", json={"reportedWorkerId": other["id"], "reason": "Rude"})
        assert response.status_code == 403

    def test_requires_session(self, client, bob):
        _, worker = bob
        response = client.post("/api/reports", json={"reportedWorkerId": worker["id"], "reason": "x"})
        assert response.status_code == 401
